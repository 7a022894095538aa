"""Tests for JSON value classification, decoding and canonical serialization."""

from __future__ import annotations

import pytest

from jsoneditor.core.errors import JsonParseError
from jsoneditor.core.values import (
    JsonKind,
    canonical_json,
    decode_json,
    is_blank,
    json_equal,
    kind_of,
)


class TestKindOf:
    """Tests for kind_of function."""

    @pytest.mark.parametrize(
        "value, kind",
        [
            ({}, JsonKind.OBJECT),
            ([], JsonKind.ARRAY),
            ("", JsonKind.STRING),
            (0, JsonKind.NUMBER),
            (1.5, JsonKind.NUMBER),
            (True, JsonKind.BOOLEAN),
            (False, JsonKind.BOOLEAN),
            (None, JsonKind.NULL),
        ],
    )
    def test_kinds(self, value, kind):
        """Every JSON variant maps to exactly one kind."""
        assert kind_of(value) is kind

    def test_bool_is_not_number(self):
        """Booleans are never classified as numbers."""
        assert kind_of(True) is not JsonKind.NUMBER

    def test_non_json_value(self):
        """Python objects outside the JSON model are rejected."""
        with pytest.raises(TypeError):
            kind_of({1, 2})


class TestDecodeJson:
    """Tests for decode_json function."""

    def test_decodes_object(self):
        """Valid JSON decodes to Python values."""
        assert decode_json('{"a": [1, null]}') == {"a": [1, None]}

    @pytest.mark.parametrize("text", ["", "   ", "\n\t\r\n"])
    def test_blank_is_empty_object(self, text):
        """A blank document decodes to an empty object."""
        assert decode_json(text) == {}

    def test_invalid_json_raises(self):
        """Syntax errors raise JsonParseError with a position."""
        with pytest.raises(JsonParseError) as exc_info:
            decode_json('{"a": 1,,}')
        assert exc_info.value.line == 1
        assert "line 1" in str(exc_info.value)

    @pytest.mark.parametrize("text", ["NaN", '{"a": Infinity}', "[-Infinity]"])
    def test_non_standard_constants_rejected(self, text):
        """NaN and Infinity are not standard JSON."""
        with pytest.raises(JsonParseError):
            decode_json(text)

    def test_blank_rejected_when_not_allowed(self):
        """With allow_blank=False a blank document is invalid JSON."""
        with pytest.raises(JsonParseError) as exc_info:
            decode_json("  \n", allow_blank=False)
        assert exc_info.value.msg == "Expecting value"

    def test_too_deep_for_decoder(self):
        """Nesting beyond the decoder's limit raises JsonParseError."""
        with pytest.raises(JsonParseError, match="Nesting too deep"):
            decode_json("[" * 100000 + "]" * 100000)

    def test_is_blank(self):
        """Only JSON whitespace counts as blank."""
        assert is_blank(" \n")
        assert not is_blank(" {} ")


class TestCanonicalJson:
    """Tests for canonical_json and json_equal."""

    def test_compact_form(self):
        """Output is compact with no spaces."""
        assert canonical_json({"a": [1, 2], "b": None}) == '{"a":[1,2],"b":null}'

    def test_key_order_matters(self):
        """Objects differing only in key order are not equal."""
        assert not json_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})

    def test_integral_float_equals_int(self):
        """1.0 and 1 are the same JSON number."""
        assert canonical_json(1.0) == "1"
        assert json_equal({"n": 2.0}, {"n": 2})

    def test_fractional_float_kept(self):
        """Non-integral floats keep their fraction."""
        assert canonical_json(0.5) == "0.5"

    def test_non_finite_float_is_null(self):
        """Overflowing numbers serialize as null."""
        assert canonical_json(decode_json("1e400")) == "null"

    @pytest.mark.parametrize(
        "left, right",
        [
            (True, 1),
            (False, 0),
            ("1", 1),
            (None, False),
            ("", None),
        ],
    )
    def test_no_coercion(self, left, right):
        """Values of different kinds are never equal."""
        assert not json_equal(left, right)

    def test_unicode_not_escaped(self):
        """Non-ASCII text is kept as-is."""
        assert canonical_json("é") == '"é"'
