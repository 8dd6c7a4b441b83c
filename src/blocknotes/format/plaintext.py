"""Display/export rendering of a notes document as plain text."""

from ..core.model import DEFAULT_HEADING_LEVEL, NoteBlock, NotesDocument

BULLET_GLYPH = "•"


def block_to_plain_text(block: NoteBlock) -> str:
    # dispatch on the tag so verbatim-kept entries render like typed ones
    if block.type == "checklist":
        return f"[{'x' if block.checked is True else ' '}] {block.content}"
    if block.type == "heading":
        return f"{'#' * (getattr(block, 'level', None) or DEFAULT_HEADING_LEVEL)} {block.content}"
    if block.type == "bullet":
        return f"{BULLET_GLYPH} {block.content}"
    if block.type == "numbered":
        # no positional index here; see DESIGN.md
        return f"- {block.content}"
    return block.content


def notes_to_plain_text(doc: NotesDocument) -> str:
    """Render one line per block, in document order.

    Not a storage format: reparsing the result only recovers checklist
    lines, everything else comes back as text blocks.
    """
    return "\n".join(block_to_plain_text(b) for b in doc.blocks)
