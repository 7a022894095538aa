"""Mixins for the TUI application."""

from jsoneditor.tui.mixins.dual_pane import DualPaneMixin

__all__ = [
    "DualPaneMixin",
]
