import json
import logging
from typing import Any

from ..core.model import (
    BLOCK_CLASSES,
    HEADING_LEVELS,
    NOTES_VERSION,
    ChecklistBlock,
    HeadingBlock,
    NoteBlock,
    NotesDocument,
    RawBlock,
)

LOGGER = logging.getLogger(__name__)

_BASE_KEYS = ("id", "type", "content")
_DOC_KEYS = ("version", "blocks")


def block_to_dict(block: NoteBlock) -> Any:
    if isinstance(block, RawBlock):
        return block.raw
    out: dict[str, Any] = {"id": block.id, "type": block.type, "content": block.content}
    if isinstance(block, ChecklistBlock):
        out["checked"] = block.checked
    elif isinstance(block, HeadingBlock):
        out["level"] = block.level
    for k, v in block.extra.items():
        out.setdefault(k, v)
    return out


def notes_to_dict(doc: NotesDocument) -> dict[str, Any]:
    out: dict[str, Any] = {"version": doc.version, "blocks": [block_to_dict(b) for b in doc.blocks]}
    for k, v in doc.extra.items():
        out.setdefault(k, v)
    return out


def serialize_notes(doc: NotesDocument) -> str:
    """Serialize a document to its compact JSON storage string."""
    return json.dumps(notes_to_dict(doc), separators=(",", ":"), ensure_ascii=False)


def _is_version_one(value: Any) -> bool:
    # JSON true must not pass for 1
    return not isinstance(value, bool) and isinstance(value, (int, float)) and value == NOTES_VERSION


def is_notes_payload(value: Any) -> bool:
    """True when a decoded JSON value has the {version: 1, blocks: [...]} shape."""
    return (
        isinstance(value, dict)
        and _is_version_one(value.get("version"))
        and isinstance(value.get("blocks"), list)
    )


def _is_level(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value in HEADING_LEVELS


def dict_to_block(raw: Any) -> NoteBlock:
    """
    Decode one stored block entry.

    Entries that fit a typed variant exactly become that variant, with any
    keys it has no field for kept in ``extra``. Everything else is wrapped
    in a RawBlock so it is written back byte for byte.
    """
    if not isinstance(raw, dict):
        LOGGER.debug("Keeping non-object block entry verbatim: %s", type(raw).__name__)
        return RawBlock(raw)

    tag = raw.get("type")
    cls = BLOCK_CLASSES.get(tag) if isinstance(tag, str) else None
    block_id = raw.get("id")
    content = raw.get("content")
    if cls is None or not isinstance(block_id, str) or not isinstance(content, str):
        LOGGER.debug("Keeping block %r of type %r verbatim", block_id, tag)
        return RawBlock(raw)

    if cls is ChecklistBlock:
        if not isinstance(raw.get("checked"), bool):
            LOGGER.debug("Block %r: checked %r kept verbatim", block_id, raw.get("checked"))
            return RawBlock(raw)
        own = _BASE_KEYS + ("checked",)
        extra = {k: v for k, v in raw.items() if k not in own}
        return ChecklistBlock(id=block_id, content=content, checked=raw["checked"], extra=extra)

    if cls is HeadingBlock:
        if not _is_level(raw.get("level")):
            LOGGER.debug("Block %r: heading level %r kept verbatim", block_id, raw.get("level"))
            return RawBlock(raw)
        own = _BASE_KEYS + ("level",)
        extra = {k: v for k, v in raw.items() if k not in own}
        return HeadingBlock(id=block_id, content=content, level=raw["level"], extra=extra)

    extra = {k: v for k, v in raw.items() if k not in _BASE_KEYS}
    return cls(id=block_id, content=content, extra=extra)


def decode_notes(payload: dict[str, Any]) -> NotesDocument:
    """Build a document from a payload already accepted by is_notes_payload."""
    return NotesDocument(
        version=NOTES_VERSION,
        blocks=[dict_to_block(raw) for raw in payload["blocks"]],
        extra={k: v for k, v in payload.items() if k not in _DOC_KEYS},
    )
