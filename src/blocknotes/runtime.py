"""Runtime wiring helper for CLI applications."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.idgen import make_id_generator
from .config import NotesConfig, load_config
from .core.blocks import set_default_id_generator
from .core.ports import IdGenerator


@dataclass
class Runtime:
    """Container for all wired components."""
    idgen: IdGenerator
    config: NotesConfig


def build_runtime(config_path: Path | None = None) -> Runtime:
    """Load configuration and install its id generator process-wide."""
    config = load_config(config_path=config_path)
    idgen = make_id_generator(config.id.strategy, nbytes=config.id.bytes)
    set_default_id_generator(idgen)
    return Runtime(idgen=idgen, config=config)
