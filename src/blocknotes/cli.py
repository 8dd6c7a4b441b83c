"""CLI for blocknotes - block-based notes parsing and conversion."""

import argparse
import json
import logging
import platform
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

from . import __version__
from .adapters.json_codec import notes_to_dict, serialize_notes
from .adapters.plaintext_parser import parse_notes
from .core.blocks import create_block
from .editor import is_near_limit, set_block_checked
from .format.markdown import markdown_to_notes, notes_to_markdown
from .format.plaintext import notes_to_plain_text
from .preview import preview_notes
from .runtime import build_runtime
from .stats import get_checklist_stats

LOGGER = logging.getLogger(__name__)


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _read_stored(path: str) -> str | None:
    """Read a stored notes file; a missing file is an empty notes field."""
    p = Path(path)
    return p.read_text(encoding="utf-8") if p.exists() else None


def _write_output(text: str, out: str | None) -> None:
    if out:
        Path(out).write_text(text, encoding="utf-8")
    else:
        print(text)


def _markdown_flag(args: argparse.Namespace, rt: Any) -> bool:
    return bool(getattr(args, "markdown", False) or rt.config.parse.markdown)


def cmd_parse(args: argparse.Namespace, rt: Any) -> int:
    """Parse notes (JSON or plain text) and print the stored form."""
    doc = parse_notes(_read_input(args.file), markdown=_markdown_flag(args, rt))
    if args.pretty:
        print(json.dumps(notes_to_dict(doc), indent=2, ensure_ascii=False))
    else:
        print(serialize_notes(doc))
    return 0


def cmd_text(args: argparse.Namespace, rt: Any) -> int:
    """Print notes as plain text."""
    doc = parse_notes(_read_input(args.file), markdown=_markdown_flag(args, rt))
    print(notes_to_plain_text(doc))
    return 0


def cmd_stats(args: argparse.Namespace, rt: Any) -> int:
    """Print checklist progress."""
    stats = get_checklist_stats(parse_notes(_read_input(args.file)))
    if args.json:
        out = stats.as_dict()
        out["percent"] = stats.percent
        print(json.dumps(out))
    else:
        print(f"{stats.completed}/{stats.total} ({stats.percent}%)")
    return 0


def cmd_preview(args: argparse.Namespace, rt: Any) -> int:
    """Print the first blocks of a note."""
    doc = parse_notes(_read_input(args.file))
    max_lines = args.max_lines if args.max_lines is not None else rt.config.preview.max_lines
    pv = preview_notes(doc, max_lines=max_lines, compact=not args.full)
    if pv.stats.total and not args.quiet:
        print(f"[{pv.stats.completed}/{pv.stats.total}]")
    print(notes_to_plain_text(replace(doc, blocks=pv.blocks)))
    if pv.has_more:
        print("...")
    return 0


def cmd_add(args: argparse.Namespace, rt: Any) -> int:
    """Append a block to a stored notes file."""
    if args.checked and args.type != "checklist":
        print("--checked only applies to checklist blocks", file=sys.stderr)
        return 1
    doc = parse_notes(_read_stored(args.file), markdown=_markdown_flag(args, rt))
    block = create_block(args.type, args.content, level=args.level, idgen=rt.idgen)
    doc = replace(doc, blocks=[*doc.blocks, block])
    if args.checked:
        doc = set_block_checked(doc, block.id, True)

    if is_near_limit(doc, rt.config.editor.max_length):
        LOGGER.warning("%s is close to the %d character limit", args.file, rt.config.editor.max_length)

    Path(args.file).write_text(serialize_notes(doc), encoding="utf-8")
    if not args.quiet:
        print(block.id)
    return 0


def cmd_check(args: argparse.Namespace, rt: Any) -> int:
    """Check or uncheck a checklist block in a stored notes file."""
    raw = _read_stored(args.file)
    if raw is None:
        print(f"Notes file {args.file} not found", file=sys.stderr)
        return 1
    doc = parse_notes(raw)
    if not any(b.id == args.block_id for b in doc.blocks):
        print(f"Block {args.block_id} not found", file=sys.stderr)
        return 1
    doc = set_block_checked(doc, args.block_id, not args.uncheck)
    Path(args.file).write_text(serialize_notes(doc), encoding="utf-8")
    return 0


def cmd_export(args: argparse.Namespace, rt: Any) -> int:
    """Export notes as Markdown with YAML frontmatter."""
    doc = parse_notes(_read_input(args.file), markdown=_markdown_flag(args, rt))
    meta: dict[str, Any] = {}
    for kv in args.meta:
        k, _, val = kv.partition("=")
        meta[k.strip()] = val.strip()
    text = notes_to_markdown(doc, meta)
    if args.out:
        Path(args.out).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
    return 0


def cmd_import(args: argparse.Namespace, rt: Any) -> int:
    """Import Markdown and print the stored form."""
    meta, doc = markdown_to_notes(_read_input(args.file))
    if meta:
        LOGGER.debug("Frontmatter not stored: %s", ", ".join(map(str, meta)))
    _write_output(serialize_notes(doc), args.out)
    return 0


def cmd_id(args: argparse.Namespace, rt: Any) -> int:
    """Print a new block ID."""
    print(rt.idgen.new_id())
    return 0


def _version_string() -> str:
    return (
        f"blocknotes {__version__} "
        f"(python {platform.python_version()}, platform {platform.system().lower()})"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blocknotes", description="Block-based notes CLI"
    )
    parser.add_argument(
        "--version", action="version", version=_version_string()
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: cwd/blocknotes.toml)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "--json", action="store_true", help="Machine-readable output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    # parse command
    parser_parse = subparsers.add_parser("parse", help="Parse notes into the stored JSON form")
    parser_parse.add_argument("file", nargs="?", default="-", help="Input file (default: stdin)")
    parser_parse.add_argument("--markdown", action="store_true", help="Detect headings and lists")
    parser_parse.add_argument("--pretty", action="store_true", help="Indented JSON")

    # text command
    parser_text = subparsers.add_parser("text", help="Render notes as plain text")
    parser_text.add_argument("file", nargs="?", default="-", help="Input file (default: stdin)")
    parser_text.add_argument("--markdown", action="store_true", help="Detect headings and lists")

    # stats command
    parser_stats = subparsers.add_parser("stats", help="Checklist progress")
    parser_stats.add_argument("file", nargs="?", default="-", help="Input file (default: stdin)")

    # preview command
    parser_preview = subparsers.add_parser("preview", help="Show the first blocks of a note")
    parser_preview.add_argument("file", nargs="?", default="-", help="Input file (default: stdin)")
    parser_preview.add_argument("--max-lines", type=int, default=None, help="Blocks to show")
    parser_preview.add_argument("--full", action="store_true", help="Show every block")

    # add command
    parser_add = subparsers.add_parser("add", help="Append a block to a notes file")
    parser_add.add_argument("file", help="Stored notes file (created if missing)")
    parser_add.add_argument(
        "type", choices=["text", "heading", "checklist", "bullet", "numbered"]
    )
    parser_add.add_argument("content", nargs="?", default="", help="Block content")
    parser_add.add_argument("--level", type=int, choices=[1, 2, 3], default=None)
    parser_add.add_argument("--checked", action="store_true", help="Mark the new checklist item done (checklist only)")
    parser_add.add_argument("--markdown", action="store_true", help="Detect headings and lists in legacy text")

    # check command
    parser_check = subparsers.add_parser("check", help="Check a checklist block")
    parser_check.add_argument("file", help="Stored notes file")
    parser_check.add_argument("block_id", help="Block ID")
    parser_check.add_argument("--uncheck", action="store_true", help="Clear the check instead")

    # export command
    parser_export = subparsers.add_parser("export", help="Export notes as Markdown")
    parser_export.add_argument("file", nargs="?", default="-", help="Input file (default: stdin)")
    parser_export.add_argument("--meta", action="append", default=[], help="Frontmatter key=value")
    parser_export.add_argument("-o", "--out", default=None, help="Output file")
    parser_export.add_argument("--markdown", action="store_true", help="Detect headings and lists")

    # import command
    parser_import = subparsers.add_parser("import", help="Import Markdown notes")
    parser_import.add_argument("file", nargs="?", default="-", help="Input file (default: stdin)")
    parser_import.add_argument("-o", "--out", default=None, help="Output file")

    # id command
    subparsers.add_parser("id", help="Print a new block ID")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "parse": cmd_parse,
        "text": cmd_text,
        "stats": cmd_stats,
        "preview": cmd_preview,
        "add": cmd_add,
        "check": cmd_check,
        "export": cmd_export,
        "import": cmd_import,
        "id": cmd_id,
    }

    handler = handlers.get(args.cmd)
    if handler is None:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        return 1

    try:
        rt = build_runtime(config_path=args.config)
        return handler(args, rt)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
