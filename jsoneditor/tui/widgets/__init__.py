"""TUI widgets for the JSON editor."""

from jsoneditor.tui.widgets.document_panel import DocumentPanel
from jsoneditor.tui.widgets.highlight_view import HighlightView

__all__ = [
    # Editor view column
    "DocumentPanel",
    # Highlight rendering
    "HighlightView",
]
