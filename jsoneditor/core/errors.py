"""
Exception hierarchy for the JSON editor.

Every error raised by the core is a JsonEditorError so that event handlers
can report it to the user without stopping the editor.
"""

from __future__ import annotations


class JsonEditorError(Exception):
    """Base class for all recoverable editor errors."""


class JsonParseError(JsonEditorError, ValueError):
    """Source text is not valid JSON.

    Attributes:
        msg: The unformatted error message.
        line: 1-based line of the offending character.
        column: 1-based column of the offending character.
    """

    def __init__(self, msg: str, line: int, column: int) -> None:
        self.msg = msg
        self.line = line
        self.column = column
        super().__init__(f"{msg}: line {line} column {column}")


class ComparisonError(JsonEditorError):
    """The structural delta between two values could not be computed."""


class QueryError(JsonEditorError):
    """A JMESPath expression failed to compile or evaluate."""
