"""
TUI JSON Editor.

A Textual-based terminal editor with two view columns for comparing and
filtering JSON documents.

Usage:
    python -m jsoneditor.tui.app left.json right.json --compare

Components:
    - JsonEditorApp: Main application class (implements EditorHost)
    - DocumentPanel: One view column (editor + highlight view)
    - HighlightView: Renders comparison highlights
    - PromptModal: Single-line input prompt
"""
