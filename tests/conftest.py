"""Pytest configuration and shared fixtures for jsoneditor tests."""

from __future__ import annotations

from typing import Sequence

import pytest

from jsoneditor.core.controller import JsonEditorController
from jsoneditor.core.documents import Document, ViewColumn
from jsoneditor.core.host import HighlightCategory
from jsoneditor.core.spans import Range


class FakeHost:
    """In-memory EditorHost recording everything the controller asks for.

    Attributes:
        visible: Documents currently visible, in column order.
        active: The focused document.
        created: Documents created through open_document().
        shown: (document, column) pairs passed to show_document().
        decorations: Latest ranges per (document id, category).
        infos: Information messages shown.
        errors: Error messages shown.
    """

    def __init__(self) -> None:
        self.visible: list[Document] = []
        self.active: Document | None = None
        self.created: list[Document] = []
        self.shown: list[tuple[Document, ViewColumn]] = []
        self.decorations: dict[tuple[int, HighlightCategory], list[Range]] = {}
        self.decoration_calls = 0
        self.infos: list[str] = []
        self.errors: list[str] = []
        self.controller: JsonEditorController | None = None

    def visible_documents(self) -> list[Document]:
        return list(self.visible)

    def active_document(self) -> Document | None:
        return self.active

    def open_document(self, language_id: str, content: str) -> Document:
        document = Document.untitled(language_id, content)
        self.created.append(document)
        return document

    def show_document(self, document: Document, column: ViewColumn) -> None:
        self.shown.append((document, column))
        self.visible.append(document)

    def replace_text(self, document: Document, text: str) -> None:
        document.text = text
        if self.controller is not None:
            self.controller.on_document_edited(document)

    def set_decorations(
        self,
        document: Document,
        category: HighlightCategory,
        ranges: Sequence[Range],
    ) -> None:
        self.decorations[(id(document), category)] = list(ranges)
        self.decoration_calls += 1

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    # -- Test helpers -------------------------------------------------------

    def added(self, document: Document) -> list[Range]:
        """Return the ADDED ranges last set for a document."""
        return self.decorations.get((id(document), HighlightCategory.ADDED), [])

    def changed(self, document: Document) -> list[Range]:
        """Return the CHANGED ranges last set for a document."""
        return self.decorations.get((id(document), HighlightCategory.CHANGED), [])

    def edit(self, document: Document, text: str) -> None:
        """Simulate the user typing a new text into a document."""
        document.text = text
        assert self.controller is not None
        self.controller.on_document_edited(document)


@pytest.fixture
def host() -> FakeHost:
    """Return a fake host with a controller attached."""
    fake = FakeHost()
    fake.controller = JsonEditorController(fake)
    return fake


@pytest.fixture
def controller(host: FakeHost) -> JsonEditorController:
    """Return the controller attached to the fake host."""
    assert host.controller is not None
    return host.controller


@pytest.fixture
def left_text() -> str:
    """Return a left document with nested objects, arrays and literals."""
    return (
        "{\n"
        '  "name": "alpha",\n'
        '  "version": 1,\n'
        '  "tags": ["a", "b", "c"],\n'
        '  "owner": {"id": 7, "email": "x@example.com"},\n'
        '  "only_left": true\n'
        "}\n"
    )


@pytest.fixture
def right_text() -> str:
    """Return a right document differing from left_text in every way."""
    return (
        "{\n"
        '  "name": "alpha",\n'
        '  "version": 2,\n'
        '  "tags": ["c", "a"],\n'
        '  "owner": {"id": 7, "email": "y@example.com"},\n'
        '  "only_right": null\n'
        "}\n"
    )

