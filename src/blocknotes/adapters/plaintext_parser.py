import json
import logging
import re
from typing import Any

from ..core.blocks import (
    create_bullet_block,
    create_checklist_block,
    create_heading_block,
    create_numbered_block,
    create_text_block,
)
from ..core.model import NoteBlock, NotesDocument
from .json_codec import decode_notes, is_notes_payload

LOGGER = logging.getLogger(__name__)

# Whitespace and line terminators as JavaScript's \s and String.trim() see
# them; the remainder stops short of a line terminator, so "[x] Done\r"
# stays a text line.
_WS_CODEPOINTS = (
    0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x1680,
    *range(0x2000, 0x200B),
    0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF,
)
_WS_CHARS = "".join(map(chr, _WS_CODEPOINTS))
_LINE_TERMINATORS = "".join(map(chr, (0x0A, 0x0D, 0x2028, 0x2029)))

_WS = f"[{re.escape(_WS_CHARS)}]"
_REST = f"([^{re.escape(_LINE_TERMINATORS)}]*)"

CHECKLIST_RE = re.compile(rf"{_WS}*\[([xX ])\]{_WS}*{_REST}")
HEADING_RE = re.compile(rf"(#{{1,3}}){_WS}+{_REST}")
BULLET_RE = re.compile(rf"{_WS}*[-*]{_WS}+{_REST}")
NUMBERED_RE = re.compile(rf"{_WS}*[0-9]+[.)]{_WS}+{_REST}")


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_line(line: str, markdown: bool) -> NoteBlock:
    m = CHECKLIST_RE.fullmatch(line)
    if m:
        return create_checklist_block(m.group(2), checked=m.group(1).lower() == "x")

    if markdown:
        m = HEADING_RE.fullmatch(line)
        if m:
            return create_heading_block(m.group(2), level=len(m.group(1)))
        m = BULLET_RE.fullmatch(line)
        if m:
            return create_bullet_block(m.group(1))
        m = NUMBERED_RE.fullmatch(line)
        if m:
            return create_numbered_block(m.group(1))

    return create_text_block(line)


def parse_plain_text(text: str, markdown: bool = False) -> NotesDocument:
    """
    Line-oriented parse: one block per "\\n"-separated line, in order.

    Only checklist lines ("[ ]", "[x]", "[X]") are recognized unless
    ``markdown`` is set, which also picks up "#" headings, "-"/"*" bullets
    and "1." / "1)" numbered items.
    """
    return NotesDocument(
        version=1, blocks=[_parse_line(ln, markdown) for ln in text.split("\n")]
    )


def parse_notes(input: str | None, *, markdown: bool = False) -> NotesDocument:
    """
    Parse a stored notes string (JSON payload or legacy plain text).

    Never raises: anything that is not a ``{"version": 1, "blocks": [...]}``
    payload is reinterpreted line by line.
    """
    if input is None or input.strip(_WS_CHARS) == "":
        return NotesDocument(version=1, blocks=[])

    try:
        parsed = json.loads(input, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        pass
    else:
        if is_notes_payload(parsed):
            return decode_notes(parsed)

    LOGGER.debug("Input is not a notes payload; parsing %d chars as plain text", len(input))
    return parse_plain_text(input, markdown=markdown)
