"""Block editing operations.

Every operation returns a new NotesDocument and leaves its input untouched,
so a caller can keep the previous value for undo or change detection.
"""

from dataclasses import dataclass, replace

from .adapters.json_codec import serialize_notes
from .core.blocks import create_block
from .core.model import (
    BLOCK_CLASSES,
    DEFAULT_HEADING_LEVEL,
    HEADING_LEVELS,
    ChecklistBlock,
    HeadingBlock,
    NoteBlock,
    NotesDocument,
    RawBlock,
)
from .core.ports import IdGenerator

DEFAULT_MAX_LENGTH = 100_000
NEAR_LIMIT_RATIO = 0.9

# Block type created when Enter is pressed at the end of a block
CONTINUATION_TYPES = {
    "heading": "text",
    "checklist": "checklist",
    "bullet": "bullet",
    "numbered": "numbered",
    "text": "text",
}


class BlockNotFoundError(LookupError):
    pass


@dataclass(frozen=True)
class BlockCommand:
    id: str
    label: str
    block_type: str
    level: int | None = None


BLOCK_COMMANDS: tuple[BlockCommand, ...] = (
    BlockCommand("text", "Text", "text"),
    BlockCommand("h1", "Heading 1", "heading", 1),
    BlockCommand("h2", "Heading 2", "heading", 2),
    BlockCommand("h3", "Heading 3", "heading", 3),
    BlockCommand("checklist", "Checklist", "checklist"),
    BlockCommand("bullet", "Bullet List", "bullet"),
    BlockCommand("numbered", "Numbered List", "numbered"),
)


def find_commands(query: str = "") -> list[BlockCommand]:
    """Slash-command lookup: case-insensitive substring match on the label."""
    q = query.lower()
    return [cmd for cmd in BLOCK_COMMANDS if q in cmd.label.lower()]


def _with_blocks(doc: NotesDocument, blocks: list[NoteBlock]) -> NotesDocument:
    return replace(doc, blocks=blocks)


def _index_of(doc: NotesDocument, block_id: str) -> int:
    for i, block in enumerate(doc.blocks):
        if block.id == block_id:
            return i
    raise BlockNotFoundError(f"Block {block_id} not found")


def add_block(
    doc: NotesDocument,
    block_type: str,
    level: int | None = None,
    idgen: IdGenerator | None = None,
) -> tuple[NotesDocument, NoteBlock]:
    """Append an empty block of the given type."""
    block = create_block(block_type, level=level, idgen=idgen)
    return _with_blocks(doc, [*doc.blocks, block]), block


def insert_block_after(
    doc: NotesDocument, block_id: str, idgen: IdGenerator | None = None
) -> tuple[NotesDocument, NoteBlock]:
    """Insert an empty continuation block right after ``block_id``.

    Lists and checklists continue with the same type; headings and text are
    followed by a text block.
    """
    index = _index_of(doc, block_id)
    current = doc.blocks[index]
    block = create_block(CONTINUATION_TYPES.get(current.type, "text"), idgen=idgen)
    blocks = list(doc.blocks)
    blocks.insert(index + 1, block)
    return _with_blocks(doc, blocks), block


def _with_content(block: NoteBlock, content: str) -> NoteBlock:
    if isinstance(block, RawBlock):
        if not isinstance(block.raw, dict):
            return block
        return RawBlock({**block.raw, "content": content})
    return replace(block, content=content)


def update_block_content(doc: NotesDocument, block_id: str, content: str) -> NotesDocument:
    return _with_blocks(
        doc,
        [_with_content(b, content) if b.id == block_id else b for b in doc.blocks],
    )


def set_block_checked(doc: NotesDocument, block_id: str, checked: bool) -> NotesDocument:
    # only checklist blocks carry a checked flag
    return _with_blocks(
        doc,
        [
            replace(b, checked=checked)
            if b.id == block_id and isinstance(b, ChecklistBlock)
            else b
            for b in doc.blocks
        ],
    )


def delete_block(doc: NotesDocument, block_id: str) -> NotesDocument:
    return _with_blocks(doc, [b for b in doc.blocks if b.id != block_id])


def convert_block(
    doc: NotesDocument,
    block_id: str,
    block_type: str,
    level: int | None = None,
) -> NotesDocument:
    """Change a block's type in place, keeping its id and clearing its content."""
    cls = BLOCK_CLASSES.get(block_type)
    if cls is None:
        raise ValueError(f"Unknown block type: {block_type}")
    if cls is HeadingBlock:
        lvl = DEFAULT_HEADING_LEVEL if level is None else level
        if lvl not in HEADING_LEVELS:
            raise ValueError(f"Heading level must be 1, 2 or 3, got {lvl!r}")

    def convert(block: NoteBlock) -> NoteBlock:
        if cls is HeadingBlock:
            return HeadingBlock(id=block.id, content="", level=lvl)
        if cls is ChecklistBlock:
            return ChecklistBlock(id=block.id, content="", checked=False)
        return cls(id=block.id, content="")

    return _with_blocks(
        doc, [convert(b) if b.id == block_id else b for b in doc.blocks]
    )


def serialized_length(doc: NotesDocument) -> int:
    return len(serialize_notes(doc))


def is_near_limit(doc: NotesDocument, max_length: int = DEFAULT_MAX_LENGTH) -> bool:
    """True once the stored form passes 90% of ``max_length`` characters."""
    return serialized_length(doc) > max_length * NEAR_LIMIT_RATIO
