"""
Span-annotated JSON parser.

This module turns JSON source text into a parse tree in which every object
key, array element and literal carries its exact source span. The tree is
what lets differences found between decoded values be mapped back onto the
text of an editor document.

Node types:
    - ObjectNode: ordered PropertyNode(key, value) pairs
    - ArrayNode: ordered element nodes
    - LiteralNode: a decoded string, number, boolean or null

Strings and numbers are decoded with the scanner primitives of the stdlib
``json`` package, so literal values are identical to ``json.loads`` output.
Duplicate keys are kept as separate properties in source order.
"""

from __future__ import annotations

import bisect
import json.decoder
import json.scanner
from dataclasses import dataclass, field
from typing import Any, Union

from jsoneditor.core.errors import JsonParseError
from jsoneditor.core.spans import Position, Span
from jsoneditor.core.values import JSON_WHITESPACE, is_blank


@dataclass(frozen=True)
class KeyNode:
    """An object key token (including its quotes)."""

    value: str
    span: Span


@dataclass(frozen=True)
class LiteralNode:
    """A scalar value: string, number, boolean or null."""

    value: Any
    span: Span


@dataclass(frozen=True)
class ArrayNode:
    """An array and its element nodes."""

    span: Span
    children: list[Node] = field(default_factory=list)


@dataclass(frozen=True)
class PropertyNode:
    """A ``"key": value`` member of an object."""

    key: KeyNode
    value: Node

    @property
    def span(self) -> Span:
        """Span from the first character of the key to the end of the value."""
        return self.key.span.extend_to(self.value.span)


@dataclass(frozen=True)
class ObjectNode:
    """An object and its properties in source order."""

    span: Span
    children: list[PropertyNode] = field(default_factory=list)


Node = Union[ObjectNode, ArrayNode, LiteralNode]

_LITERAL_KEYWORDS: dict[str, Any] = {
    "true": True,
    "false": False,
    "null": None,
}


class _Parser:
    """Recursive-descent parser over a single source string."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.length = len(source)
        self._line_starts = [0]
        for index, char in enumerate(source):
            if char == "\n":
                self._line_starts.append(index + 1)

    def position(self, offset: int) -> Position:
        line_index = bisect.bisect_right(self._line_starts, offset) - 1
        return Position(line_index + 1, offset - self._line_starts[line_index] + 1, offset)

    def error(self, msg: str, offset: int) -> JsonParseError:
        pos = self.position(offset)
        return JsonParseError(msg, pos.line, pos.column)

    def skip_whitespace(self, offset: int) -> int:
        while offset < self.length and self.source[offset] in JSON_WHITESPACE:
            offset += 1
        return offset

    def parse_document(self) -> Node:
        offset = self.skip_whitespace(0)
        node, offset = self.parse_value(offset)
        offset = self.skip_whitespace(offset)
        if offset != self.length:
            raise self.error("Extra data", offset)
        return node

    def parse_value(self, offset: int) -> tuple[Node, int]:
        if offset >= self.length:
            raise self.error("Expecting value", offset)
        char = self.source[offset]
        if char == "{":
            return self.parse_object(offset)
        if char == "[":
            return self.parse_array(offset)
        if char == '"':
            value, end = self.parse_string(offset)
            return LiteralNode(value, self.span(offset, end)), end
        for keyword, value in _LITERAL_KEYWORDS.items():
            if self.source.startswith(keyword, offset):
                end = offset + len(keyword)
                return LiteralNode(value, self.span(offset, end)), end
        match = json.scanner.NUMBER_RE.match(self.source, offset)
        if match is None:
            raise self.error("Expecting value", offset)
        integer, frac, exp = match.groups()
        if frac or exp:
            number: Any = float(integer + (frac or "") + (exp or ""))
        else:
            number = int(integer)
        return LiteralNode(number, self.span(offset, match.end())), match.end()

    def parse_string(self, offset: int) -> tuple[str, int]:
        try:
            return json.decoder.scanstring(self.source, offset + 1, True)
        except json.JSONDecodeError as e:
            raise JsonParseError(e.msg, e.lineno, e.colno) from e

    def parse_object(self, start: int) -> tuple[ObjectNode, int]:
        properties: list[PropertyNode] = []
        offset = self.skip_whitespace(start + 1)
        if offset < self.length and self.source[offset] == "}":
            return ObjectNode(self.span(start, offset + 1), properties), offset + 1

        while True:
            if offset >= self.length or self.source[offset] != '"':
                raise self.error(
                    "Expecting property name enclosed in double quotes", offset
                )
            key_value, key_end = self.parse_string(offset)
            key = KeyNode(key_value, self.span(offset, key_end))

            offset = self.skip_whitespace(key_end)
            if offset >= self.length or self.source[offset] != ":":
                raise self.error("Expecting ':' delimiter", offset)
            offset = self.skip_whitespace(offset + 1)

            value, offset = self.parse_value(offset)
            properties.append(PropertyNode(key, value))

            offset = self.skip_whitespace(offset)
            if offset < self.length and self.source[offset] == "}":
                return ObjectNode(self.span(start, offset + 1), properties), offset + 1
            if offset >= self.length or self.source[offset] != ",":
                raise self.error("Expecting ',' delimiter", offset)
            offset = self.skip_whitespace(offset + 1)

    def parse_array(self, start: int) -> tuple[ArrayNode, int]:
        children: list[Node] = []
        offset = self.skip_whitespace(start + 1)
        if offset < self.length and self.source[offset] == "]":
            return ArrayNode(self.span(start, offset + 1), children), offset + 1

        while True:
            value, offset = self.parse_value(offset)
            children.append(value)

            offset = self.skip_whitespace(offset)
            if offset < self.length and self.source[offset] == "]":
                return ArrayNode(self.span(start, offset + 1), children), offset + 1
            if offset >= self.length or self.source[offset] != ",":
                raise self.error("Expecting ',' delimiter", offset)
            offset = self.skip_whitespace(offset + 1)

    def span(self, start: int, end: int) -> Span:
        return Span(self.position(start), self.position(end))


def parse(source: str) -> Node:
    """Parse JSON source text into a span-annotated tree.

    A blank document parses to an empty ObjectNode at line 1, column 1,
    matching how ``decode_json`` treats it.

    Args:
        source: The full document text.

    Returns:
        The root node of the parse tree.

    Raises:
        JsonParseError: If the text is not syntactically valid JSON, or is
            nested too deeply to parse.

    Examples:
        >>> root = parse('{"a": 1}')
        >>> root.children[0].key.value
        'a'
        >>> root.children[0].value.span.to_range()
        Range(start_line=0, start_character=6, end_line=0, end_character=7)
    """
    parser = _Parser(source)
    if is_blank(source):
        origin = parser.position(0)
        return ObjectNode(Span(origin, origin))
    try:
        return parser.parse_document()
    except RecursionError as e:
        raise JsonParseError("Nesting too deep", 1, 1) from e


def node_to_value(node: Node) -> Any:
    """Rebuild the decoded JSON value represented by a parse tree node.

    Duplicate keys resolve the way ``json.loads`` resolves them: the last
    occurrence wins.
    """
    if isinstance(node, ObjectNode):
        return {prop.key.value: node_to_value(prop.value) for prop in node.children}
    if isinstance(node, ArrayNode):
        return [node_to_value(child) for child in node.children]
    return node.value
