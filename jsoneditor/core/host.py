"""
Editor host interface.

The controller never talks to a UI toolkit directly. Anything that can hold
documents in two view columns, render highlight ranges and show
notifications can host it by implementing EditorHost.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, Sequence

from jsoneditor.core.documents import Document, ViewColumn
from jsoneditor.core.spans import Range


class HighlightCategory(Enum):
    """Visual treatment applied to a set of ranges."""

    ADDED = "added"
    CHANGED = "changed"


class EditorHost(Protocol):
    """Services the controller needs from the editor."""

    def visible_documents(self) -> list[Document]:
        """Return the documents currently shown, in view column order."""
        ...

    def active_document(self) -> Document | None:
        """Return the document that has focus, if any."""
        ...

    def open_document(self, language_id: str, content: str) -> Document:
        """Create a new untitled document (not yet shown)."""
        ...

    def show_document(self, document: Document, column: ViewColumn) -> None:
        """Show a document in a view column without taking focus."""
        ...

    def replace_text(self, document: Document, text: str) -> None:
        """Replace the whole text of a document as a single edit."""
        ...

    def set_decorations(
        self,
        document: Document,
        category: HighlightCategory,
        ranges: Sequence[Range],
    ) -> None:
        """Replace a document's ranges for one category; empty clears it."""
        ...

    def show_info(self, message: str) -> None:
        """Show a non-blocking information message."""
        ...

    def show_error(self, message: str) -> None:
        """Show a non-blocking error message."""
        ...
