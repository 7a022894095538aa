"""
Controller connecting editor events to the comparison session.

The controller is created once per editor host and owns the only mutable
comparison state, the ComparisonSession. It reacts to three host events
(comparison command, visibility change, document edit) and to the filter
command, and reports every recoverable error through the host's error
sink exactly once.
"""

from __future__ import annotations

import logging
from typing import Iterable

from jsoneditor.core.documents import JSON_LANGUAGE, Document, ViewColumn
from jsoneditor.core.errors import JsonEditorError, JsonParseError, QueryError
from jsoneditor.core.highlighter import HighlightSet, compare_texts
from jsoneditor.core.host import EditorHost, HighlightCategory
from jsoneditor.core.query import filter_text
from jsoneditor.core.session import ComparisonSession
from jsoneditor.core.values import decode_json

logger = logging.getLogger(__name__)

COMPARE_MESSAGE = "Compare your JSONs"
FILTER_SUCCESS_MESSAGE = "JSON filtered using JMESPath"
NO_ACTIVE_DOCUMENT_MESSAGE = "No active editor found!"
INVALID_FILE_MESSAGE = "Invalid JSON in file!"


class JsonEditorController:
    """Wires host events to the session, highlighter and filter.

    Attributes:
        host: The editor host providing documents and rendering.
        session: The tracked left/right document pair.
    """

    def __init__(self, host: EditorHost) -> None:
        self.host = host
        self.session = ComparisonSession()

    # -- Comparison ---------------------------------------------------------

    def activate_comparison(self) -> None:
        """Start (or resume) comparing two JSON documents.

        Visible JSON documents are adopted into the empty slots; blank JSON
        documents are created for slots that are still empty, the left one
        in view column ONE and the right one in column TWO.
        """
        self.session.adopt(doc for doc in self.host.visible_documents() if doc.is_json)

        if self.session.left is None:
            self.session.assign(self._create_blank(ViewColumn.ONE))
        if self.session.right is None:
            self.session.assign(self._create_blank(ViewColumn.TWO))

        self.host.show_info(COMPARE_MESSAGE)
        self.run_comparison()

    def _create_blank(self, column: ViewColumn) -> Document:
        document = self.host.open_document(JSON_LANGUAGE, "")
        self.host.show_document(document, column)
        logger.info("Created %s for comparison in column %s", document.title, column.name)
        return document

    def on_visibility_change(self, visible: Iterable[Document]) -> None:
        """Update the tracked pair after the set of visible documents changed."""
        before = self.session.documents
        dropped = self.session.on_visibility_change(visible)
        if not dropped:
            return
        for document in before:
            self._clear(document)

    def on_document_edited(self, document: Document) -> None:
        """Re-run the comparison if an edited document is being tracked."""
        if self.session.is_complete and self.session.tracks(document):
            self.run_comparison()

    def run_comparison(self) -> bool:
        """Recompute and render the highlights of the tracked pair.

        On a parse or comparison failure the error is reported once and the
        previous highlights are left untouched.

        Returns:
            True if highlights were rendered, False otherwise.
        """
        left, right = self.session.left, self.session.right
        if left is None or right is None:
            return False

        try:
            result = compare_texts(left.text, right.text)
        except JsonEditorError as e:
            logger.warning("Comparison of %s and %s failed: %s", left.title, right.title, e)
            self.host.show_error(f"Invalid JSON: {e}")
            return False

        self._render(left, result.left)
        self._render(right, result.right)
        return True

    def _render(self, document: Document, highlights: HighlightSet) -> None:
        self.host.set_decorations(document, HighlightCategory.ADDED, highlights.added)
        self.host.set_decorations(document, HighlightCategory.CHANGED, highlights.changed)

    def _clear(self, document: Document) -> None:
        self._render(document, HighlightSet())

    # -- Filter -------------------------------------------------------------

    def check_filterable(self) -> Document | None:
        """Return the active document if it can be filtered.

        Reports an error and returns None when there is no active document
        or its text is blank or not valid JSON.
        """
        document = self.host.active_document()
        if document is None:
            self.host.show_error(NO_ACTIVE_DOCUMENT_MESSAGE)
            return None
        try:
            decode_json(document.text, allow_blank=False)
        except JsonParseError:
            self.host.show_error(INVALID_FILE_MESSAGE)
            return None
        return document

    def filter_document(self, document: Document, expression: str | None) -> bool:
        """Replace a document's text with the result of a JMESPath query.

        Args:
            document: The document to filter.
            expression: The JMESPath expression; empty or None does nothing.

        Returns:
            True if the document was replaced.
        """
        if not expression:
            return False
        try:
            new_text = filter_text(document.text, expression)
        except JsonParseError:
            self.host.show_error(INVALID_FILE_MESSAGE)
            return False
        except QueryError as e:
            logger.warning("Query %r failed: %s", expression, e)
            self.host.show_error(f"Error running JMESPath: {e}")
            return False

        self.host.replace_text(document, new_text)
        self.host.show_info(FILTER_SUCCESS_MESSAGE)
        return True
