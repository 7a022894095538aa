"""
Comparison session: the tracked left/right document pair.

The session owns no diff logic. It only decides which two documents are
being compared and keeps that decision consistent as documents appear and
disappear from view.
"""

from __future__ import annotations

import logging
from typing import Iterable

from jsoneditor.core.documents import Document

logger = logging.getLogger(__name__)


class ComparisonSession:
    """The pair of documents designated left and right for comparison.

    Invariant: when both slots are filled they hold distinct documents.
    Slots are only filled by adopt() (or by the controller after creating a
    blank document) and only emptied by visibility changes.

    Attributes:
        left: The left document, or None.
        right: The right document, or None.
    """

    def __init__(self) -> None:
        self.left: Document | None = None
        self.right: Document | None = None

    @property
    def is_complete(self) -> bool:
        """Check if both slots are filled."""
        return self.left is not None and self.right is not None

    @property
    def documents(self) -> list[Document]:
        """Return the tracked documents, left first."""
        return [doc for doc in (self.left, self.right) if doc is not None]

    def tracks(self, document: Document) -> bool:
        """Check if a document is one of the tracked pair."""
        return document is self.left or document is self.right

    def adopt(self, candidates: Iterable[Document]) -> None:
        """Fill empty slots from candidate documents, in order.

        A candidate fills ``left`` when it is empty and the candidate is
        not already ``right``; otherwise a candidate other than ``left``
        fills ``right`` when that is empty. Filled slots are never
        overwritten.

        Args:
            candidates: Visible JSON documents in view column order.
        """
        for document in candidates:
            if self.left is None and document is not self.right:
                self.left = document
            elif document is not self.left and self.right is None:
                self.right = document
        logger.debug("Session adopted left=%s right=%s", _title(self.left), _title(self.right))

    def assign(self, document: Document) -> None:
        """Put a document into the first empty slot."""
        if self.left is None:
            self.left = document
        elif self.right is None and document is not self.left:
            self.right = document

    def on_visibility_change(self, visible: Iterable[Document]) -> list[Document]:
        """Drop documents that are no longer visible.

        If ``left`` disappeared, ``right`` is promoted to ``left`` and the
        right slot is cleared. Otherwise, if ``right`` disappeared, its slot
        is cleared. At most one transition happens per call.

        Args:
            visible: The documents currently visible.

        Returns:
            The documents that left the session (possibly empty).
        """
        visible_ids = {id(doc) for doc in visible}
        dropped: list[Document] = []

        if self.left is not None and id(self.left) not in visible_ids:
            dropped.append(self.left)
            self.left = self.right
            self.right = None
        elif self.right is not None and id(self.right) not in visible_ids:
            dropped.append(self.right)
            self.right = None

        if dropped:
            logger.debug("Session now left=%s right=%s", _title(self.left), _title(self.right))
        return dropped


def _title(document: Document | None) -> str:
    return document.title if document is not None else "-"
