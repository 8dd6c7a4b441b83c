"""Tests for note previews."""

import pytest

from blocknotes.adapters.plaintext_parser import parse_notes
from blocknotes.preview import preview_notes


def test_compact_preview_truncates():
    """Test that compact previews keep the first blocks."""
    doc = parse_notes("a\nb\nc\n[x] d\ne")
    pv = preview_notes(doc, max_lines=2)

    assert [b.content for b in pv.blocks] == ["a", "b"]
    assert pv.has_more is True
    assert pv.stats.total == 1


def test_compact_preview_exact_fit():
    """Test has_more when everything fits."""
    pv = preview_notes(parse_notes("a\nb"), max_lines=2)

    assert pv.has_more is False


def test_full_preview_keeps_everything():
    """Test the full variant."""
    doc = parse_notes("\n".join(str(i) for i in range(10)))
    pv = preview_notes(doc, max_lines=2, compact=False)

    assert len(pv.blocks) == 10
    assert pv.has_more is False


def test_preview_rejects_negative_lines():
    """Test argument validation."""
    with pytest.raises(ValueError):
        preview_notes(parse_notes("a"), max_lines=-1)
