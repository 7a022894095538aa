"""
JMESPath filtering of JSON documents.

Usage:
    from jsoneditor.core.query import filter_text

    new_text = filter_text('{"people": [{"age": 40}]}', "people[?age > `30`]")
"""

from __future__ import annotations

import json
from typing import Any

import jmespath
from jmespath.exceptions import JMESPathError

from jsoneditor.core.errors import QueryError
from jsoneditor.core.values import decode_json

# Indentation used when a filter result replaces a document
RESULT_INDENT = 2


def run_query(value: Any, expression: str) -> Any:
    """Evaluate a JMESPath expression against a decoded JSON value.

    Args:
        value: The decoded document.
        expression: The JMESPath expression.

    Returns:
        The query result (None when nothing matches).

    Raises:
        QueryError: If the expression is invalid or fails to evaluate.
    """
    try:
        return jmespath.search(expression, value)
    except JMESPathError as e:
        raise QueryError(str(e)) from e
    except RecursionError as e:
        raise QueryError("Document is nested too deeply to query") from e


def format_result(result: Any) -> str:
    """Render a query result as the new document text."""
    try:
        return json.dumps(result, indent=RESULT_INDENT, ensure_ascii=False)
    except RecursionError as e:
        raise QueryError("Result is nested too deeply to format") from e


def filter_text(text: str, expression: str) -> str:
    """Apply a JMESPath expression to a document's text.

    Args:
        text: The document text.
        expression: The JMESPath expression.

    Returns:
        The pretty-printed query result.

    Raises:
        JsonParseError: If the text is blank or not valid JSON.
        QueryError: If the expression is invalid or fails to evaluate.
    """
    return format_result(run_query(decode_json(text, allow_blank=False), expression))
