"""
JSON Compare & Filter Editor.

A Textual-based terminal editor with two JSON conveniences:

    - Structural comparison: two open JSON documents are compared on every
      edit and the differing keys, array elements and values are
      highlighted in their source text.
    - Query filter: the active document is replaced with the result of a
      JMESPath expression.

Usage:
    jsoneditor left.json right.json

Components:
    - JsonEditorApp: Main application class (the host editor)
    - JsonEditorController: Wires editor events to the comparison session
    - ComparisonSession: Tracks the left/right document pair
    - parse: Span-annotated JSON parser
    - compare_texts: Difference highlighter
"""

__version__ = "0.1.0"
