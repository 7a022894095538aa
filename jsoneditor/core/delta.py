"""
Structural delta between two decoded JSON values.

The delta itself is never inspected: the highlighter only needs to know
whether one exists, so that semantically identical documents (whitespace or
key-order edits) clear their highlights without walking the parse trees.
"""

from __future__ import annotations

import logging
from typing import Any

from deepdiff import DeepDiff

from jsoneditor.core.errors import ComparisonError
from jsoneditor.core.values import normalize_numbers

logger = logging.getLogger(__name__)


def compute_delta(left: Any, right: Any) -> dict[str, Any]:
    """Compute the structural delta between two JSON values.

    Object key order is ignored, array order is not, and ``1`` and ``1.0``
    are the same number. Numbers are normalized before diffing so that no
    other type coercion happens: ``true`` and ``1`` differ.

    Args:
        left: The left decoded value.
        right: The right decoded value.

    Returns:
        The delta as a plain dictionary; empty when the values are equal.

    Raises:
        ComparisonError: If the delta cannot be computed.
    """
    try:
        delta = DeepDiff(normalize_numbers(left), normalize_numbers(right))
    except Exception as e:
        raise ComparisonError(f"Could not compare documents: {e}") from e
    return delta.to_dict()


def has_delta(left: Any, right: Any) -> bool:
    """Return True if the two values differ structurally.

    Examples:
        >>> has_delta({"a": 1, "b": 2}, {"b": 2, "a": 1})
        False
        >>> has_delta([1, 2], [2, 1])
        True
    """
    delta = compute_delta(left, right)
    if delta:
        logger.debug("Delta found in %d categories", len(delta))
    return bool(delta)
