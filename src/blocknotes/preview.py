from dataclasses import dataclass

from .core.model import NoteBlock, NotesDocument
from .stats import ChecklistStats, get_checklist_stats

DEFAULT_PREVIEW_LINES = 4


@dataclass(frozen=True)
class NotePreview:
    blocks: list[NoteBlock]
    has_more: bool
    stats: ChecklistStats


def preview_notes(
    doc: NotesDocument, max_lines: int = DEFAULT_PREVIEW_LINES, compact: bool = True
) -> NotePreview:
    """Pick the blocks shown in a card preview.

    Compact previews keep the first ``max_lines`` blocks and flag whether
    anything was cut; full previews keep every block.
    """
    if max_lines < 0:
        raise ValueError(f"max_lines must be >= 0, got {max_lines}")
    if compact:
        visible = list(doc.blocks[:max_lines])
        has_more = len(doc.blocks) > max_lines
    else:
        visible = list(doc.blocks)
        has_more = False
    return NotePreview(blocks=visible, has_more=has_more, stats=get_checklist_stats(doc))
