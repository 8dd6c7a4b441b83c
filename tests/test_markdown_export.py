"""Tests for Markdown export and import."""

from blocknotes.core.model import (
    BulletBlock,
    ChecklistBlock,
    HeadingBlock,
    NotesDocument,
    NumberedBlock,
    TextBlock,
)
from blocknotes.format.markdown import YamlFrontmatter, markdown_to_notes, notes_to_markdown


def _doc() -> NotesDocument:
    return NotesDocument(
        version=1,
        blocks=[
            HeadingBlock(id="1", content="Trip", level=1),
            ChecklistBlock(id="2", content="Passport", checked=True),
            ChecklistBlock(id="3", content="Tickets"),
            NumberedBlock(id="4", content="Pack"),
            NumberedBlock(id="5", content="Leave"),
            BulletBlock(id="6", content="Snacks"),
            NumberedBlock(id="7", content="Again"),
            TextBlock(id="8", content="Bon voyage"),
        ],
    )


def test_notes_to_markdown_body_and_frontmatter():
    """Test the exported layout."""
    text = notes_to_markdown(_doc(), {"title": "Trip"})
    meta, body = YamlFrontmatter().decode(text)

    assert meta == {"title": "Trip", "version": 1, "checklist": {"total": 2, "completed": 1}}
    assert body.split("\n") == [
        "# Trip",
        "[x] Passport",
        "[ ] Tickets",
        "1. Pack",
        "2. Leave",
        "- Snacks",
        "1. Again",
        "Bon voyage",
        "",
    ]


def test_markdown_round_trip_keeps_types():
    """Test that block types and content survive export and import."""
    doc = _doc()
    meta, back = markdown_to_notes(notes_to_markdown(doc, {"title": "Trip"}))

    assert meta == {"title": "Trip"}
    assert [(b.type, b.content) for b in back.blocks] == [(b.type, b.content) for b in doc.blocks]
    assert back.blocks[1].checked is True
    assert back.blocks[0].level == 1
    assert {b.id for b in back.blocks}.isdisjoint({b.id for b in doc.blocks})


def test_markdown_without_frontmatter():
    """Test importing hand-written Markdown."""
    meta, doc = markdown_to_notes("## Plan\n* one\n")

    assert meta == {}
    assert [b.type for b in doc.blocks] == ["heading", "bullet"]


def test_export_empty_document():
    """Test that an empty document still carries frontmatter."""
    text = notes_to_markdown(NotesDocument())

    assert text.startswith("---\n")
    assert text.endswith("---\n")
    assert markdown_to_notes(text)[1] == NotesDocument()


def test_frontmatter_encode_empty():
    """Test that empty metadata encodes to nothing."""
    assert YamlFrontmatter().encode({}) == ""
