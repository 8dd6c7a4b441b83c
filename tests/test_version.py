"""Tests for version information."""

from blocknotes import __version__
from blocknotes.runtime import build_runtime


def test_version_module():
    """Test that version is accessible from module."""
    assert __version__
    assert isinstance(__version__, str)
    # Should be in SemVer format
    parts = __version__.split('.')
    assert len(parts) >= 2  # At least MAJOR.MINOR


def test_build_runtime_defaults(tmp_path, monkeypatch):
    """Test wiring with no config file."""
    from blocknotes.adapters.idgen import UuidId
    from blocknotes.core.blocks import set_default_id_generator

    monkeypatch.chdir(tmp_path)
    rt = build_runtime()
    try:
        assert isinstance(rt.idgen, UuidId)
        assert rt.config.parse.markdown is False
    finally:
        set_default_id_generator(UuidId())
