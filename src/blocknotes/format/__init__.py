"""Rendering utilities for notes documents."""

from .markdown import markdown_to_notes, notes_to_markdown
from .plaintext import notes_to_plain_text

__all__ = [
    "markdown_to_notes",
    "notes_to_markdown",
    "notes_to_plain_text",
]
