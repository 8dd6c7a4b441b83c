"""Tests for block constructors and id generation."""

import uuid

import pytest

from blocknotes.adapters.idgen import HexId, UuidId, make_id_generator
from blocknotes.core.blocks import (
    create_block,
    create_bullet_block,
    create_checklist_block,
    create_empty_notes,
    create_heading_block,
    create_numbered_block,
    create_text_block,
    set_default_id_generator,
)
from blocknotes.core.model import (
    BulletBlock,
    ChecklistBlock,
    HeadingBlock,
    NotesDocument,
    NumberedBlock,
    TextBlock,
)


class SeqId:
    def __init__(self, prefix: str = "b"):
        self.prefix = prefix
        self.n = 0

    def new_id(self) -> str:
        self.n += 1
        return f"{self.prefix}{self.n}"


def test_constructor_defaults():
    """Test default content, checked and level."""
    text = create_text_block()
    check = create_checklist_block()
    heading = create_heading_block()

    assert isinstance(text, TextBlock) and text.content == ""
    assert isinstance(check, ChecklistBlock) and check.checked is False
    assert isinstance(heading, HeadingBlock) and heading.level == 2
    assert isinstance(create_bullet_block("x"), BulletBlock)
    assert isinstance(create_numbered_block("x"), NumberedBlock)


def test_type_tags():
    """Test the class-level type tags."""
    assert [b.type for b in (
        create_text_block(),
        create_heading_block(),
        create_checklist_block(),
        create_bullet_block(),
        create_numbered_block(),
    )] == ["text", "heading", "checklist", "bullet", "numbered"]


def test_constructors_mint_unique_ids():
    """Test that ids never repeat across constructor calls."""
    ids = [create_text_block().id for _ in range(200)]

    assert len(set(ids)) == 200


def test_default_ids_are_uuids():
    """Test that the default generator yields UUID strings."""
    assert uuid.UUID(create_text_block().id)


def test_explicit_id_generator():
    """Test passing an id generator to a constructor."""
    gen = SeqId()

    assert create_text_block("a", idgen=gen).id == "b1"
    assert create_checklist_block("a", idgen=gen).id == "b2"


def test_set_default_id_generator():
    """Test swapping the process-wide generator."""
    previous = set_default_id_generator(SeqId("x"))
    try:
        assert create_bullet_block().id == "x1"
    finally:
        set_default_id_generator(previous)


@pytest.mark.parametrize("level", [0, 4, True])
def test_heading_level_validation(level):
    """Test that heading levels outside 1-3 are rejected."""
    with pytest.raises(ValueError):
        create_heading_block("H", level=level)


def test_blocks_are_immutable():
    """Test that blocks are frozen dataclasses."""
    block = create_text_block("a")
    with pytest.raises(AttributeError):
        block.content = "b"


def test_create_block_dispatch():
    """Test building blocks from a type tag."""
    assert isinstance(create_block("heading", "H", level=3), HeadingBlock)
    assert create_block("heading", "H").level == 2
    assert isinstance(create_block("checklist"), ChecklistBlock)
    assert isinstance(create_block("bullet"), BulletBlock)
    assert isinstance(create_block("numbered"), NumberedBlock)
    assert isinstance(create_block("unknown", "x"), TextBlock)


def test_create_empty_notes():
    """Test the empty document helper."""
    assert create_empty_notes() == NotesDocument(version=1, blocks=[])


def test_hex_id_length():
    """Test hex ids use two characters per byte."""
    assert len(HexId(nbytes=4).new_id()) == 8


def test_make_id_generator():
    """Test strategy lookup."""
    assert isinstance(make_id_generator("uuid"), UuidId)
    assert isinstance(make_id_generator("hex", nbytes=3), HexId)
    with pytest.raises(ValueError):
        make_id_generator("sequential")


@pytest.mark.parametrize("nbytes", [0, -1, True])
def test_hex_id_rejects_non_positive_sizes(nbytes):
    """Test that HexId refuses sizes that would give empty or repeated ids."""
    with pytest.raises(ValueError):
        HexId(nbytes=nbytes)


def test_create_block_heading_level_zero():
    """Test that an explicit level 0 is rejected, not defaulted."""
    with pytest.raises(ValueError):
        create_block("heading", "H", level=0)
