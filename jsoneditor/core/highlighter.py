"""
Difference highlighter for two JSON documents.

This module walks the parse tree of one document (the primary side) in
lock-step with the decoded value of the other document and collects the
source ranges that should be highlighted on the primary side.

Highlight categories:
    - added: content with no counterpart on the other side, or whose type
      differs from its counterpart (the whole subtree is treated as new)
    - changed: a literal present on both sides whose value differs

The walk is run once per direction. Keys that only exist on the other side
are never marked here; they show up when the other side is the primary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from jsoneditor.core.delta import has_delta
from jsoneditor.core.errors import ComparisonError
from jsoneditor.core.json_ast import (
    ArrayNode,
    Node,
    ObjectNode,
    PropertyNode,
    node_to_value,
    parse,
)
from jsoneditor.core.spans import Range
from jsoneditor.core.values import JsonKind, canonical_json, decode_json, kind_of

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class HighlightSet:
    """Ranges to highlight on one side of a comparison.

    Attributes:
        added: Ranges of content unique to this side.
        changed: Ranges of literals whose value differs from the other side.
    """

    added: list[Range] = field(default_factory=list)
    changed: list[Range] = field(default_factory=list)

    def extend(self, other: HighlightSet) -> None:
        """Merge another set's ranges into this one."""
        self.added.extend(other.added)
        self.changed.extend(other.changed)

    def is_empty(self) -> bool:
        """Check if there is nothing to highlight."""
        return not self.added and not self.changed


@dataclass
class ComparisonResult:
    """Outcome of comparing two document texts.

    Attributes:
        left: Highlights for the first text.
        right: Highlights for the second text.
        has_delta: Whether the decoded values differ at all.
    """

    left: HighlightSet
    right: HighlightSet
    has_delta: bool


def _lookup(value: Any, key: str) -> Any:
    """Return ``value[key]`` or _MISSING when value is not an object or lacks key."""
    if kind_of(value) is JsonKind.OBJECT:
        return value.get(key, _MISSING)
    return _MISSING


def highlight_differences(
    value: Any,
    other: Any,
    tree: Node,
) -> HighlightSet:
    """
    Collect the ranges of ``tree`` that differ from ``other``.

    Only object roots are walked; a tree whose root is an array or a literal
    yields an empty HighlightSet. For every property of an object node the
    counterpart is looked up by key in ``other``:

        - object value: recurse when the counterpart is an object too,
          otherwise mark the whole ``"key": {...}`` span as added
        - array value: when the counterpart is an array, mark each element
          that has no canonically equal element anywhere in it; otherwise
          mark the whole ``"key": [...]`` span as added
        - literal value: mark the whole span as added when the key is
          absent, or as changed when the canonical forms differ

    Args:
        value: The decoded value of the primary side at this level.
        other: The decoded value of the other side at this level.
        tree: The primary side's parse tree node at this level.

    Returns:
        The ranges to highlight, in document order.

    Examples:
        >>> tree = parse('{"a": 1}')
        >>> result = highlight_differences({"a": 1}, {"a": 2}, tree)
        >>> result.changed
        [Range(start_line=0, start_character=1, end_line=0, end_character=7)]
    """
    result = HighlightSet()
    if not isinstance(tree, ObjectNode):
        return result

    for prop in tree.children:
        counterpart = _lookup(other, prop.key.value)
        node = prop.value

        if isinstance(node, ObjectNode):
            _highlight_object(prop, value, counterpart, result)
        elif isinstance(node, ArrayNode):
            _highlight_array(prop, counterpart, result)
        else:
            _highlight_literal(prop, value, counterpart, result)

    return result


def _highlight_object(
    prop: PropertyNode,
    value: Any,
    counterpart: Any,
    result: HighlightSet,
) -> None:
    if counterpart is not _MISSING and kind_of(counterpart) is JsonKind.OBJECT:
        own = _lookup(value, prop.key.value)
        if own is _MISSING:
            own = node_to_value(prop.value)
        result.extend(highlight_differences(own, counterpart, prop.value))
    else:
        result.added.append(prop.span.to_range())


def _highlight_array(
    prop: PropertyNode,
    counterpart: Any,
    result: HighlightSet,
) -> None:
    if counterpart is _MISSING or kind_of(counterpart) is not JsonKind.ARRAY:
        result.added.append(prop.span.to_range())
        return

    # Unordered containment: position and multiplicity are ignored
    available = {canonical_json(item) for item in counterpart}
    for child in prop.value.children:
        if canonical_json(node_to_value(child)) not in available:
            result.added.append(child.span.to_range())


def _highlight_literal(
    prop: PropertyNode,
    value: Any,
    counterpart: Any,
    result: HighlightSet,
) -> None:
    if counterpart is _MISSING:
        result.added.append(prop.span.to_range())
        return

    # The decoded value decides, so a duplicated key compares its last occurrence
    own = _lookup(value, prop.key.value)
    if own is _MISSING:
        own = prop.value.value
    if canonical_json(own) != canonical_json(counterpart):
        result.changed.append(prop.span.to_range())


def compare_texts(text_a: str, text_b: str) -> ComparisonResult:
    """Compare two document texts and compute the highlights for both.

    The delta check runs once and is shared by both directions. When the
    decoded values are equal both HighlightSets are empty and the parse
    trees are never built.

    Args:
        text_a: Text of the left document.
        text_b: Text of the right document.

    Returns:
        A ComparisonResult holding one HighlightSet per side.

    Raises:
        JsonParseError: If either text is not valid JSON.
        ComparisonError: If the delta between the values cannot be computed,
            or the documents are nested too deeply to walk.
    """
    value_a = decode_json(text_a)
    value_b = decode_json(text_b)

    if not has_delta(value_a, value_b):
        return ComparisonResult(HighlightSet(), HighlightSet(), has_delta=False)

    tree_a = parse(text_a)
    tree_b = parse(text_b)

    try:
        left = highlight_differences(value_a, value_b, tree_a)
        right = highlight_differences(value_b, value_a, tree_b)
    except RecursionError as e:
        raise ComparisonError("Documents are nested too deeply to compare") from e
    logger.debug(
        "Highlights: left +%d ~%d, right +%d ~%d",
        len(left.added),
        len(left.changed),
        len(right.added),
        len(right.changed),
    )
    return ComparisonResult(left, right, has_delta=True)
