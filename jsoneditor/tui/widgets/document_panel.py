"""
Document Panel widget: one editor view column.

A panel shows at most one document. It stacks a header (title and the
overview counts of each highlight category), a TextArea for editing and a
HighlightView that renders the same text with comparison highlights.
"""

from __future__ import annotations

from typing import Sequence

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Static, TextArea

from jsoneditor.core.documents import Document, ViewColumn
from jsoneditor.core.host import HighlightCategory
from jsoneditor.core.spans import Range
from jsoneditor.tui.widgets.highlight_view import HighlightView

EMPTY_PANEL_TITLE = "(no document)"


class DocumentPanel(Vertical):
    """A view column holding one document.

    Attributes:
        column: The view column this panel represents.
        document: The document shown, or None.
    """

    class Focused(Message):
        """Posted when a widget inside the panel receives focus.

        Attributes:
            panel: The panel that gained focus.
        """

        def __init__(self, panel: DocumentPanel) -> None:
            self.panel = panel
            super().__init__()

    DEFAULT_CSS = """
    DocumentPanel .panel-header {
        dock: top;
        height: 1;
        text-style: bold;
        background: $primary-darken-1;
        padding: 0 1;
    }

    DocumentPanel TextArea {
        height: 1fr;
    }

    DocumentPanel .highlight-scroll {
        height: 1fr;
        border-top: solid $primary;
    }
    """

    def __init__(
        self,
        column: ViewColumn,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.column = column
        self.document: Document | None = None
        self._counts: dict[HighlightCategory, int] = {
            category: 0 for category in HighlightCategory
        }

    def compose(self) -> ComposeResult:
        yield Static(EMPTY_PANEL_TITLE, classes="panel-header")
        yield TextArea(disabled=True, show_line_numbers=True)
        with VerticalScroll(classes="highlight-scroll"):
            yield HighlightView()

    @property
    def editor(self) -> TextArea:
        """The TextArea editing the document."""
        return self.query_one(TextArea)

    @property
    def highlight_view(self) -> HighlightView:
        """The HighlightView rendering the document's highlights."""
        return self.query_one(HighlightView)

    def show(self, document: Document | None) -> None:
        """Display a document (or nothing) in this panel.

        Highlights of the previously shown document are discarded; the app
        re-applies the stored decorations of the new document.
        """
        self.document = document
        editor = self.editor
        view = self.highlight_view
        for category in HighlightCategory:
            view.set_ranges(category, [])
            self._counts[category] = 0

        if document is None:
            editor.load_text("")
            editor.disabled = True
            view.set_source("")
        else:
            editor.disabled = False
            editor.load_text(document.text)
            view.set_source(document.text)
        self.refresh_header()

    def sync_text(self) -> None:
        """Refresh the rendered text after the document changed."""
        if self.document is None:
            return
        if self.editor.text != self.document.text:
            self.editor.load_text(self.document.text)
        self.highlight_view.set_source(self.document.text)

    def set_decorations(self, category: HighlightCategory, ranges: Sequence[Range]) -> None:
        """Replace the ranges painted for one category."""
        self.highlight_view.set_ranges(category, ranges)
        self._counts[category] = len(ranges)
        self.refresh_header()

    def refresh_header(self) -> None:
        """Redraw the title and the added/changed counts."""
        if self.document is None:
            title = EMPTY_PANEL_TITLE
        else:
            marker = "" if self.document.is_json else f" [{self.document.language_id}]"
            title = f"{self.document.title}{marker}"

        header = Text(title)
        added = self._counts[HighlightCategory.ADDED]
        changed = self._counts[HighlightCategory.CHANGED]
        if added or changed:
            header.append(f"  +{added}", style="green")
            header.append(f" ~{changed}", style="red")
        self.query_one(".panel-header", Static).update(header)

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        """Tell the app this panel is now the active one."""
        self.post_message(self.Focused(self))
