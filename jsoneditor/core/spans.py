"""
Source positions, spans and editor ranges.

Spans use the parser convention (1-based line and column, end exclusive).
Ranges use the editor convention (0-based line and character) and are what
the rendering sink consumes.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A location in source text.

    Attributes:
        line: 1-based line number.
        column: 1-based column number.
        offset: 0-based character offset from the start of the text.
    """

    line: int
    column: int
    offset: int


@dataclass(frozen=True)
class Range:
    """A 0-based editor range; the end character is exclusive."""

    start_line: int
    start_character: int
    end_line: int
    end_character: int


@dataclass(frozen=True)
class Span:
    """Source extent of a token or value.

    ``start`` is the first character of the token and ``end`` is the
    character after its last one.
    """

    start: Position
    end: Position

    def to_range(self) -> Range:
        """Convert to a 0-based editor range."""
        return Range(
            self.start.line - 1,
            self.start.column - 1,
            self.end.line - 1,
            self.end.column - 1,
        )

    def extend_to(self, other: Span) -> Span:
        """Return a span from this span's start to ``other``'s end."""
        return Span(self.start, other.end)
