"""Reusable screen components for the TUI application."""

from jsoneditor.tui.screens.prompt import PromptModal

__all__ = [
    "PromptModal",
]
