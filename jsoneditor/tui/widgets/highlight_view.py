"""
Highlight View widget for rendering a document with comparison highlights.

The view shows the document text read-only and paints each highlight
category with its own style. It is the rendering sink of the comparison:
ranges for a category always replace the previous ranges of that category,
and an empty sequence clears it.
"""

from __future__ import annotations

from typing import Sequence

from rich.text import Text
from textual.widgets import Static

from jsoneditor.core.host import HighlightCategory
from jsoneditor.core.spans import Range


class HighlightView(Static):
    """Read-only rendering of a document with highlighted ranges.

    Attributes:
        CATEGORY_STYLES: Rich style per highlight category.
    """

    CATEGORY_STYLES: dict[HighlightCategory, str] = {
        HighlightCategory.ADDED: "bold underline on rgb(27,94,32)",
        HighlightCategory.CHANGED: "bold underline on rgb(183,28,28)",
    }

    DEFAULT_CSS = """
    HighlightView {
        width: 100%;
        height: auto;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__("", name=name, id=id, classes=classes)
        self._source: str = ""
        self._ranges: dict[HighlightCategory, list[Range]] = {
            category: [] for category in HighlightCategory
        }

    @property
    def source(self) -> str:
        """The text currently rendered."""
        return self._source

    def ranges(self, category: HighlightCategory) -> list[Range]:
        """Return the ranges currently painted for a category."""
        return list(self._ranges[category])

    def set_source(self, text: str) -> None:
        """Replace the rendered text, keeping the current ranges."""
        self._source = text
        self._refresh_text()

    def set_ranges(self, category: HighlightCategory, ranges: Sequence[Range]) -> None:
        """Replace the ranges of one category; an empty sequence clears it."""
        self._ranges[category] = list(ranges)
        self._refresh_text()

    def build_text(self) -> Text:
        """Build the styled rich Text for the current source and ranges."""
        text = Text(self._source, no_wrap=True, end="")
        line_starts = _line_starts(self._source)
        length = len(self._source)
        for category in HighlightCategory:
            style = self.CATEGORY_STYLES[category]
            for r in self._ranges[category]:
                start = _to_offset(r.start_line, r.start_character, line_starts, length)
                end = _to_offset(r.end_line, r.end_character, line_starts, length)
                if end > start:
                    text.stylize(style, start, end)
        return text

    def _refresh_text(self) -> None:
        self.update(self.build_text())


def _line_starts(source: str) -> list[int]:
    starts = [0]
    for index, char in enumerate(source):
        if char == "\n":
            starts.append(index + 1)
    return starts


def _to_offset(line: int, character: int, line_starts: list[int], length: int) -> int:
    """Convert a 0-based line/character to an offset, clamped to the text.

    Ranges can outlive the text they were computed for (highlights are kept
    while a document is invalid), so out-of-range positions are clamped.
    """
    if line >= len(line_starts):
        return length
    return min(line_starts[line] + character, length)
