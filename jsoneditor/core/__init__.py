"""
Core of the JSON editor: parsing with spans, comparison and filtering.

Usage:
    from jsoneditor.core import compare_texts

    result = compare_texts('{"a": 1}', '{"a": 2}')
    print(result.left.changed)  # [Range(start_line=0, ...)]
"""

from jsoneditor.core.controller import JsonEditorController
from jsoneditor.core.delta import compute_delta, has_delta
from jsoneditor.core.documents import (
    Document,
    ViewColumn,
    detect_language,
    load_document,
    save_document,
)
from jsoneditor.core.errors import (
    ComparisonError,
    JsonEditorError,
    JsonParseError,
    QueryError,
)
from jsoneditor.core.highlighter import (
    ComparisonResult,
    HighlightSet,
    compare_texts,
    highlight_differences,
)
from jsoneditor.core.host import EditorHost, HighlightCategory
from jsoneditor.core.json_ast import (
    ArrayNode,
    KeyNode,
    LiteralNode,
    ObjectNode,
    PropertyNode,
    node_to_value,
    parse,
)
from jsoneditor.core.query import filter_text, run_query
from jsoneditor.core.session import ComparisonSession
from jsoneditor.core.spans import Position, Range, Span
from jsoneditor.core.values import JsonKind, canonical_json, decode_json, kind_of

__all__ = [
    # Controller and session
    "JsonEditorController",
    "ComparisonSession",
    # Host interface
    "EditorHost",
    "HighlightCategory",
    # Documents
    "Document",
    "ViewColumn",
    "detect_language",
    "load_document",
    "save_document",
    # Errors
    "JsonEditorError",
    "JsonParseError",
    "ComparisonError",
    "QueryError",
    # Structural locator
    "parse",
    "node_to_value",
    "ObjectNode",
    "ArrayNode",
    "LiteralNode",
    "PropertyNode",
    "KeyNode",
    "Position",
    "Span",
    "Range",
    # Values
    "JsonKind",
    "kind_of",
    "decode_json",
    "canonical_json",
    # Comparison
    "compare_texts",
    "highlight_differences",
    "HighlightSet",
    "ComparisonResult",
    "compute_delta",
    "has_delta",
    # Filter
    "filter_text",
    "run_query",
]
