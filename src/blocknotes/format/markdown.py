"""Markdown export/import with YAML frontmatter."""

import io
import re
from typing import Any

import yaml

from ..adapters.plaintext_parser import parse_notes
from ..core.model import DEFAULT_HEADING_LEVEL, HEADING_LEVELS, NotesDocument
from ..stats import get_checklist_stats

_FM = re.compile(r"^\s*---\s*\n(.*?)\n---\s*\n?", re.DOTALL)


class YamlFrontmatter:
    def decode(self, text: str) -> tuple[dict[str, Any], str]:
        m = _FM.match(text)
        if not m:
            return {}, text
        fm = yaml.safe_load(io.StringIO(m.group(1))) or {}
        if not isinstance(fm, dict):
            # a scalar or list block is body text, not metadata
            return {}, text
        body = text[m.end() :]
        return (fm, body)

    def encode(self, meta: dict[str, Any]) -> str:
        if not meta:
            return ""
        buf = io.StringIO()
        yaml.safe_dump(meta, buf, sort_keys=False, allow_unicode=True)
        return f"---\n{buf.getvalue()}---\n"


def _markdown_lines(doc: NotesDocument) -> list[str]:
    lines = []
    counter = 0
    for block in doc.blocks:
        if block.type == "numbered":
            counter += 1
            lines.append(f"{counter}. {block.content}")
            continue
        counter = 0
        if block.type == "checklist":
            lines.append(f"[{'x' if block.checked is True else ' '}] {block.content}")
        elif block.type == "heading":
            level = getattr(block, "level", None)
            if level not in HEADING_LEVELS:
                level = DEFAULT_HEADING_LEVEL
            lines.append(f"{'#' * level} {block.content}")
        elif block.type == "bullet":
            lines.append(f"- {block.content}")
        else:
            lines.append(block.content)
    return lines


def notes_to_markdown(
    doc: NotesDocument,
    meta: dict[str, Any] | None = None,
    fm: YamlFrontmatter | None = None,
) -> str:
    """
    Export a document as Markdown.

    The frontmatter mirrors whatever the caller passes in ``meta`` and adds
    ``version`` and the checklist counts. Numbered blocks get their
    position in the run (1., 2., ...), restarting after any other block.
    """
    fm = fm or YamlFrontmatter()
    stats = get_checklist_stats(doc)
    header = dict(meta or {})
    header["version"] = doc.version
    header["checklist"] = stats.as_dict()
    body = "\n".join(_markdown_lines(doc))
    return fm.encode(header) + body + ("\n" if body else "")


def markdown_to_notes(
    text: str, fm: YamlFrontmatter | None = None
) -> tuple[dict[str, Any], NotesDocument]:
    """Import Markdown written by notes_to_markdown (or by hand).

    Returns the frontmatter minus the derived ``version``/``checklist`` keys,
    and a document with fresh block ids.
    """
    fm = fm or YamlFrontmatter()
    meta, body = fm.decode(text)
    meta = {k: v for k, v in meta.items() if k not in ("version", "checklist")}
    if body.endswith("\n"):
        body = body[:-1]
    return meta, parse_notes(body, markdown=True)
