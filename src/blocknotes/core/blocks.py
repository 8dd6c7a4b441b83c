"""Block constructors.

These are the only sanctioned way to build a block: each call mints a fresh
id from the process-wide generator (or the one passed in).
"""

from ..adapters.idgen import UuidId
from .model import (
    DEFAULT_HEADING_LEVEL,
    HEADING_LEVELS,
    BulletBlock,
    ChecklistBlock,
    HeadingBlock,
    NoteBlock,
    NotesDocument,
    NumberedBlock,
    TextBlock,
)
from .ports import IdGenerator

_default_idgen: IdGenerator = UuidId()


def set_default_id_generator(idgen: IdGenerator) -> IdGenerator:
    """Replace the process-wide id generator, returning the previous one."""
    global _default_idgen
    previous = _default_idgen
    _default_idgen = idgen
    return previous


def _new_id(idgen: IdGenerator | None) -> str:
    return (idgen or _default_idgen).new_id()


def create_empty_notes() -> NotesDocument:
    return NotesDocument(version=1, blocks=[])


def create_text_block(content: str = "", idgen: IdGenerator | None = None) -> TextBlock:
    return TextBlock(id=_new_id(idgen), content=content)


def create_checklist_block(
    content: str = "", checked: bool = False, idgen: IdGenerator | None = None
) -> ChecklistBlock:
    return ChecklistBlock(id=_new_id(idgen), content=content, checked=checked)


def create_heading_block(
    content: str = "",
    level: int = DEFAULT_HEADING_LEVEL,
    idgen: IdGenerator | None = None,
) -> HeadingBlock:
    if isinstance(level, bool) or level not in HEADING_LEVELS:
        raise ValueError(f"Heading level must be 1, 2 or 3, got {level!r}")
    return HeadingBlock(id=_new_id(idgen), content=content, level=level)


def create_bullet_block(content: str = "", idgen: IdGenerator | None = None) -> BulletBlock:
    return BulletBlock(id=_new_id(idgen), content=content)


def create_numbered_block(
    content: str = "", idgen: IdGenerator | None = None
) -> NumberedBlock:
    return NumberedBlock(id=_new_id(idgen), content=content)


def create_block(
    block_type: str,
    content: str = "",
    level: int | None = None,
    idgen: IdGenerator | None = None,
) -> NoteBlock:
    """Build a block from its type tag. Unknown tags give a text block."""
    if block_type == "checklist":
        return create_checklist_block(content, idgen=idgen)
    if block_type == "heading":
        lvl = DEFAULT_HEADING_LEVEL if level is None else level
        return create_heading_block(content, lvl, idgen=idgen)
    if block_type == "bullet":
        return create_bullet_block(content, idgen=idgen)
    if block_type == "numbered":
        return create_numbered_block(content, idgen=idgen)
    return create_text_block(content, idgen=idgen)
