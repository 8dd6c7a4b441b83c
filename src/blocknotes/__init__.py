"""Block-based notes: document model, parser and serializers."""

__version__ = "0.1.0"

from .adapters.json_codec import serialize_notes
from .adapters.plaintext_parser import parse_notes
from .core.blocks import (
    create_block,
    create_bullet_block,
    create_checklist_block,
    create_empty_notes,
    create_heading_block,
    create_numbered_block,
    create_text_block,
)
from .core.model import (
    BulletBlock,
    ChecklistBlock,
    HeadingBlock,
    NoteBlock,
    NotesDocument,
    NumberedBlock,
    RawBlock,
    TextBlock,
)
from .format.plaintext import notes_to_plain_text
from .stats import ChecklistStats, get_checklist_stats

__all__ = [
    "__version__",
    "parse_notes",
    "serialize_notes",
    "notes_to_plain_text",
    "get_checklist_stats",
    "ChecklistStats",
    "NotesDocument",
    "NoteBlock",
    "TextBlock",
    "HeadingBlock",
    "ChecklistBlock",
    "BulletBlock",
    "NumberedBlock",
    "RawBlock",
    "create_empty_notes",
    "create_block",
    "create_text_block",
    "create_checklist_block",
    "create_heading_block",
    "create_bullet_block",
    "create_numbered_block",
]
