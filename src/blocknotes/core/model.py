from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal

BlockId = str
BlockType = Literal["text", "heading", "checklist", "bullet", "numbered"]

NOTES_VERSION = 1
HEADING_LEVELS = (1, 2, 3)
DEFAULT_HEADING_LEVEL = 2


# `extra` holds stored keys the variant has no field for; they are written
# back after the variant's own keys.

@dataclass(frozen=True)
class TextBlock:
    type: ClassVar[BlockType] = "text"

    id: BlockId
    content: str = ""
    extra: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass(frozen=True)
class HeadingBlock:
    type: ClassVar[BlockType] = "heading"

    id: BlockId
    content: str = ""
    level: int = DEFAULT_HEADING_LEVEL  # 1..3
    extra: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass(frozen=True)
class ChecklistBlock:
    type: ClassVar[BlockType] = "checklist"

    id: BlockId
    content: str = ""
    checked: bool = False
    extra: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass(frozen=True)
class BulletBlock:
    type: ClassVar[BlockType] = "bullet"

    id: BlockId
    content: str = ""
    extra: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass(frozen=True)
class NumberedBlock:
    type: ClassVar[BlockType] = "numbered"

    id: BlockId
    content: str = ""
    extra: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass(frozen=True)
class RawBlock:
    """
    A stored block entry that fits none of the typed variants (unknown tag,
    non-object entry, or fields of the wrong shape). ``raw`` is the decoded
    JSON value and is written back unchanged.
    """

    raw: Any

    def _get(self, key: str) -> Any:
        return self.raw.get(key) if isinstance(self.raw, dict) else None

    @property
    def id(self) -> BlockId:
        v = self._get("id")
        return "" if v is None else str(v)

    @property
    def type(self) -> str:
        v = self._get("type")
        return v if isinstance(v, str) else ""

    @property
    def content(self) -> str:
        v = self._get("content")
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @property
    def checked(self) -> bool:
        return self._get("checked") is True

    @property
    def level(self) -> int | None:
        v = self._get("level")
        return v if isinstance(v, int) and not isinstance(v, bool) else None


NoteBlock = TextBlock | HeadingBlock | ChecklistBlock | BulletBlock | NumberedBlock | RawBlock

BLOCK_CLASSES: dict[str, type] = {
    cls.type: cls
    for cls in (TextBlock, HeadingBlock, ChecklistBlock, BulletBlock, NumberedBlock)
}


@dataclass
class NotesDocument:
    version: Literal[1] = NOTES_VERSION
    blocks: list[NoteBlock] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict, repr=False)
