"""
Dual Pane Mixin for left/right view column switching.

Provides consistent panel switching behavior for the two-column editor:
- action_switch_panel(): Toggle between left and right panels
- action_focus_left() / action_focus_right(): Jump to a panel
- _update_panel_styles(): Update active/inactive CSS classes on panels
- _focus_active_widget(): Abstract method subclasses must implement

Usage:
    class MyEditorApp(DualPaneMixin, App):
        BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [...]

        def _focus_active_widget(self) -> None:
            # Focus the editor in the active panel
            ...
"""

from __future__ import annotations

from textual.binding import Binding
from textual.css.query import NoMatches


class DualPaneMixin:
    """Mixin for apps and screens with left/right panel switching.

    Manages which of the two panels is active. Subclasses must implement
    _focus_active_widget() to define how focus moves to the active panel.

    Class Attributes:
        DUAL_PANE_BINDINGS: Panel switching bindings. They take priority
            over the editor's own keys so they work while typing.
    """

    DUAL_PANE_BINDINGS = [
        Binding("tab", "switch_panel", "Switch Panel", show=True, priority=True),
        Binding("ctrl+left", "focus_left", "Left Panel", show=False, priority=True),
        Binding("ctrl+right", "focus_right", "Right Panel", show=False, priority=True),
    ]

    _active_panel: str = "left"
    """Currently active panel identifier ('left' or 'right')."""

    @property
    def is_left_active(self) -> bool:
        """Check if the left panel is currently active."""
        return self._active_panel == "left"

    @property
    def is_right_active(self) -> bool:
        """Check if the right panel is currently active."""
        return self._active_panel == "right"

    def action_switch_panel(self) -> None:
        """Toggle between left and right panels.

        Updates panel styles and transfers focus to the newly active panel.
        """
        self._active_panel = "right" if self._active_panel == "left" else "left"
        self._update_panel_styles()
        self._focus_active_widget()

    def action_focus_left(self) -> None:
        """Switch to the left panel if it is not already active."""
        if self._active_panel != "left":
            self._active_panel = "left"
            self._update_panel_styles()
            self._focus_active_widget()

    def action_focus_right(self) -> None:
        """Switch to the right panel if it is not already active."""
        if self._active_panel != "right":
            self._active_panel = "right"
            self._update_panel_styles()
            self._focus_active_widget()

    def _set_active_panel(self, side: str) -> None:
        """Mark a panel active without moving focus (focus is already there)."""
        if side != self._active_panel:
            self._active_panel = side
            self._update_panel_styles()

    def _update_panel_styles(self) -> None:
        """Update active/inactive CSS classes on panels.

        Queries for #left-panel and #right-panel widgets and updates
        their CSS classes based on which panel is currently active.
        Handles missing panels gracefully.
        """
        try:
            left = self.query_one("#left-panel")
            right = self.query_one("#right-panel")
        except NoMatches:
            return

        for panel, is_active in [(left, self.is_left_active), (right, self.is_right_active)]:
            if is_active:
                panel.remove_class("inactive")
                panel.add_class("active")
            else:
                panel.remove_class("active")
                panel.add_class("inactive")

    def _focus_active_widget(self) -> None:
        """Focus the appropriate widget in the active panel.

        Subclasses must implement this method to define how focus is
        transferred when switching panels.
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _focus_active_widget()"
        )
