"""
Editor documents.

A Document is an open text buffer: either loaded from a file or an untitled
buffer created by the editor. Documents are compared by identity, never by
content, so two buffers holding the same text remain distinct.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


# Mapping of file extensions to language identifiers
EXTENSION_LANGUAGE_MAP: dict[str, str] = {
    ".json": "json",
}

# Language assigned to files whose extension is not mapped
DEFAULT_LANGUAGE = "plaintext"

JSON_LANGUAGE = "json"

_untitled_counter = itertools.count(1)


class ViewColumn(Enum):
    """Editor view column a document can be shown in."""

    ONE = 1
    TWO = 2


def detect_language(filename: str) -> str:
    """Detect a document's language from its file extension.

    Examples:
        >>> detect_language("data.JSON")
        'json'
        >>> detect_language("notes.txt")
        'plaintext'
    """
    return EXTENSION_LANGUAGE_MAP.get(Path(filename).suffix.lower(), DEFAULT_LANGUAGE)


@dataclass(eq=False)
class Document:
    """An open text buffer.

    Attributes:
        title: Name shown in the panel header.
        text: Current content.
        language_id: Language identifier ("json" for JSON documents).
        path: File backing the document, or None for untitled buffers.
    """

    title: str
    text: str = ""
    language_id: str = JSON_LANGUAGE
    path: Path | None = None

    @property
    def is_json(self) -> bool:
        """Check if the document's content type is JSON."""
        return self.language_id == JSON_LANGUAGE

    @property
    def is_untitled(self) -> bool:
        """Check if the document has no backing file."""
        return self.path is None

    @classmethod
    def untitled(cls, language_id: str = JSON_LANGUAGE, text: str = "") -> Document:
        """Create a new untitled document."""
        return cls(
            title=f"Untitled-{next(_untitled_counter)}",
            text=text,
            language_id=language_id,
        )


def load_document(filename: str) -> Document:
    """Open a file as a document.

    Args:
        filename: Path to the file.

    Returns:
        A Document holding the file's text.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnicodeDecodeError: If the file is not UTF-8 text.
    """
    path = Path(filename)
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return Document(
        title=path.name,
        text=text,
        language_id=detect_language(filename),
        path=path,
    )


def save_document(document: Document, filename: str | None = None) -> Path:
    """Write a document's text to disk.

    Args:
        document: The document to save.
        filename: Target path; defaults to the document's own path.

    Returns:
        The path written to.

    Raises:
        ValueError: If an untitled document is saved without a filename.
    """
    if filename is not None:
        path = Path(filename)
    elif document.path is not None:
        path = document.path
    else:
        raise ValueError(f"{document.title} has no file; a filename is required")

    with open(path, "w", encoding="utf-8") as f:
        f.write(document.text)

    if document.path != path:
        document.path = path
        document.title = path.name
        document.language_id = detect_language(str(path))
    return path
