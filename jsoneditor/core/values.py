"""
Decoded JSON values: classification, decoding and canonical serialization.

Decoded values are plain Python objects (dict, list, str, int, float, bool,
None). JsonKind closes them into the six JSON variants so that callers can
branch on the kind instead of on Python types.

Equality between decoded values is canonical-serialization equality: two
values are equal when ``canonical_json`` renders them to the same string.
Object keys are serialized in parsed order, so objects that differ only in
key order are NOT equal under this test.
"""

from __future__ import annotations

import json
import math
from enum import Enum
from typing import Any

from jsoneditor.core.errors import JsonParseError

# Characters JSON treats as insignificant whitespace
JSON_WHITESPACE = " \t\n\r"


class JsonKind(Enum):
    """The closed set of JSON value variants."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


def kind_of(value: Any) -> JsonKind:
    """Classify a decoded JSON value.

    Args:
        value: A value produced by ``json.loads`` or the span parser.

    Returns:
        The JsonKind of the value.

    Raises:
        TypeError: If the value is not a JSON-compatible Python object.

    Examples:
        >>> kind_of({"a": 1})
        <JsonKind.OBJECT: 'object'>
        >>> kind_of(True)
        <JsonKind.BOOLEAN: 'boolean'>
    """
    # bool is checked before numbers because it subclasses int
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, list):
        return JsonKind.ARRAY
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def is_blank(text: str) -> bool:
    """Return True if the text holds nothing but JSON whitespace."""
    return not text.strip(JSON_WHITESPACE)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name}")


def decode_json(text: str, allow_blank: bool = True) -> Any:
    """Decode a document's text into a JSON value.

    A blank document decodes to an empty object so that a freshly created
    comparison document is always comparable.

    Args:
        text: The full document text.
        allow_blank: If False, a blank document is invalid JSON.

    Returns:
        The decoded value.

    Raises:
        JsonParseError: If the text is not standard JSON.
    """
    if allow_blank and is_blank(text):
        return {}
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise JsonParseError(e.msg, e.lineno, e.colno) from e
    except RecursionError as e:
        raise JsonParseError("Nesting too deep", 1, 1) from e
    except ValueError as e:
        raise JsonParseError(str(e), 1, 1) from e


def normalize_numbers(value: Any) -> Any:
    """Map a decoded value onto the double-precision number model."""
    kind = kind_of(value)
    if kind is JsonKind.OBJECT:
        return {key: normalize_numbers(item) for key, item in value.items()}
    if kind is JsonKind.ARRAY:
        return [normalize_numbers(item) for item in value]
    if kind is JsonKind.NUMBER and isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer():
            return int(value)
    return value


def canonical_json(value: Any) -> str:
    """Serialize a decoded value to its canonical compact form.

    Key order is preserved as parsed. Integral floats serialize like
    integers (``1.0`` and ``1`` are the same JSON number) and non-finite
    floats serialize as ``null``. No other coercion happens: ``true`` and
    ``1`` stay distinct, as do ``"1"`` and ``1``.

    Args:
        value: A decoded JSON value.

    Returns:
        The canonical JSON text.

    Examples:
        >>> canonical_json({"b": 1.0, "a": [True, None]})
        '{"b":1,"a":[true,null]}'
    """
    return json.dumps(
        normalize_numbers(value),
        ensure_ascii=False,
        separators=(",", ":"),
        allow_nan=False,
    )


def json_equal(left: Any, right: Any) -> bool:
    """Compare two decoded values by canonical serialization."""
    return canonical_json(left) == canonical_json(right)
