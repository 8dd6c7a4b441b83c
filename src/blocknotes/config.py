"""Configuration loader for blocknotes.toml."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

ID_STRATEGIES = ("uuid", "hex")
MIN_ID_BYTES = 4


@dataclass
class IdConfig:
    """Block id generation configuration."""
    strategy: str = "uuid"
    bytes: int = 6


@dataclass
class ParseConfig:
    """Plain-text parsing configuration."""
    markdown: bool = False


@dataclass
class EditorConfig:
    """Editor limits."""
    max_length: int = 100_000


@dataclass
class PreviewConfig:
    """Preview configuration."""
    max_lines: int = 4


@dataclass
class NotesConfig:
    """Complete blocknotes configuration."""
    id: IdConfig = field(default_factory=IdConfig)
    parse: ParseConfig = field(default_factory=ParseConfig)
    editor: EditorConfig = field(default_factory=EditorConfig)
    preview: PreviewConfig = field(default_factory=PreviewConfig)


def load_config(config_path: Path | None = None) -> NotesConfig:
    """
    Load configuration from blocknotes.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/blocknotes.toml

    Args:
        config_path: Explicit path to config file

    Returns:
        NotesConfig with resolved settings

    Raises:
        ValueError: if the id strategy is unknown or [id] bytes is below 4
    """
    toml_data: dict[str, Any] = {}

    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / "blocknotes.toml")

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            break

    id_data = toml_data.get("id", {})
    id_config = IdConfig(
        strategy=id_data.get("strategy", "uuid"),
        bytes=id_data.get("bytes", 6),
    )
    if id_config.strategy not in ID_STRATEGIES:
        raise ValueError(f"Unknown ID strategy: {id_config.strategy}")
    nbytes = id_config.bytes
    if isinstance(nbytes, bool) or not isinstance(nbytes, int) or nbytes < MIN_ID_BYTES:
        raise ValueError(f"[id] bytes must be an integer >= {MIN_ID_BYTES}, got {nbytes!r}")

    parse_data = toml_data.get("parse", {})
    parse_config = ParseConfig(
        markdown=parse_data.get("markdown", False)
    )

    editor_data = toml_data.get("editor", {})
    editor_config = EditorConfig(
        max_length=editor_data.get("max_length", 100_000)
    )

    preview_data = toml_data.get("preview", {})
    preview_config = PreviewConfig(
        max_lines=preview_data.get("max_lines", 4)
    )

    return NotesConfig(
        id=id_config,
        parse=parse_config,
        editor=editor_config,
        preview=preview_config,
    )
