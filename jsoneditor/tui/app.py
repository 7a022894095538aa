"""
Main Textual application for the JSON Editor.

The app is the editor host: it holds the open documents, shows at most one
document in each of its two view columns, renders comparison highlights and
shows notifications. All comparison and filter logic lives in
JsonEditorController, which the app drives through its bindings and events.

Key bindings:
    - F2: Compare the two visible JSON documents
    - F3: Filter the active document with a JMESPath query
    - F4: Open a file in the active panel
    - F5: New empty JSON document in the active panel
    - F6: Close the active panel's document
    - Ctrl+S: Save the active document
    - Tab: Switch panel
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.message import Message
from textual.screen import ModalScreen
from textual.widgets import Footer, Header, TextArea

from jsoneditor.core.controller import NO_ACTIVE_DOCUMENT_MESSAGE, JsonEditorController
from jsoneditor.core.documents import (
    JSON_LANGUAGE,
    Document,
    ViewColumn,
    load_document,
    save_document,
)
from jsoneditor.core.host import HighlightCategory
from jsoneditor.core.spans import Range
from jsoneditor.tui.mixins import DualPaneMixin
from jsoneditor.tui.screens import PromptModal
from jsoneditor.tui.widgets import DocumentPanel

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

QUERY_PROMPT = "Enter JMESPath query"
QUERY_PLACEHOLDER = "e.g. people[?age > `30`]"


class JsonEditorApp(DualPaneMixin, App):
    """A two-column JSON editor with structural comparison and filtering."""

    TITLE = "JSON Editor"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
    }

    #editor-container {
        height: 1fr;
    }

    #left-panel, #right-panel {
        width: 50%;
        border: solid $primary-darken-2;
    }

    #left-panel.active, #right-panel.active {
        border: solid $accent;
    }
    """

    BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [
        Binding("f2", "compare", "Compare"),
        Binding("f3", "filter", "Filter"),
        Binding("f4", "open_file", "Open"),
        Binding("f5", "new_document", "New"),
        Binding("f6", "close_document", "Close"),
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    # Actions that act on the panels and must not fire under a modal prompt
    PANEL_ACTIONS = frozenset(
        {
            "switch_panel",
            "focus_left",
            "focus_right",
            "compare",
            "filter",
            "open_file",
            "new_document",
            "close_document",
            "save",
        }
    )

    class VisibleDocumentsChanged(Message):
        """Posted when the set of documents shown in the panels changed."""

    def __init__(self, paths: Sequence[str] = (), compare: bool = False) -> None:
        """Initialize the app.

        Args:
            paths: Up to two files to open, left column first.
            compare: Start comparing as soon as the files are shown.
        """
        super().__init__()
        self._open_paths = list(paths)
        self._compare_on_start = compare
        self.documents: list[Document] = []
        self._decorations: dict[Document, dict[HighlightCategory, list[Range]]] = {}
        self._panels: dict[ViewColumn, DocumentPanel] = {
            ViewColumn.ONE: DocumentPanel(ViewColumn.ONE, id="left-panel", classes="active"),
            ViewColumn.TWO: DocumentPanel(ViewColumn.TWO, id="right-panel", classes="inactive"),
        }
        self.controller = JsonEditorController(self)

    def compose(self) -> ComposeResult:
        """Compose the two view columns."""
        yield Header()
        with Horizontal(id="editor-container"):
            yield self._panels[ViewColumn.ONE]
            yield self._panels[ViewColumn.TWO]
        yield Footer()

    def on_mount(self) -> None:
        """Open the files given on the command line."""
        for column, path in zip(ViewColumn, self._open_paths):
            try:
                document = load_document(path)
            except (OSError, UnicodeDecodeError) as e:
                self.show_error(f"Error loading file: {e}")
                continue
            logger.info("Opened %s in column %s", path, column.name)
            self.documents.append(document)
            self._set_panel_document(self._panels[column], document)

        self._focus_active_widget()
        if self._compare_on_start:
            self.call_after_refresh(self.controller.activate_comparison)

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Disable panel actions while a modal prompt is open."""
        if action in self.PANEL_ACTIONS and isinstance(self.screen, ModalScreen):
            return False
        return True

    # -- EditorHost ---------------------------------------------------------

    def visible_documents(self) -> list[Document]:
        """Return the documents shown in the panels, left column first."""
        return [
            panel.document
            for panel in self._panels.values()
            if panel.document is not None
        ]

    def active_document(self) -> Document | None:
        """Return the document of the active panel."""
        return self._active_panel_widget().document

    def open_document(self, language_id: str, content: str) -> Document:
        """Create an untitled document; it is shown by show_document()."""
        document = Document.untitled(language_id, content)
        self.documents.append(document)
        return document

    def show_document(self, document: Document, column: ViewColumn) -> None:
        """Show a document, preferring ``column``.

        The requested column is used unless it already shows a JSON
        document, in which case the other column is used when it does not.
        """
        preferred = self._panels[column]
        other = self._panels[ViewColumn.TWO if column is ViewColumn.ONE else ViewColumn.ONE]
        target = preferred
        if _shows_json(preferred) and not _shows_json(other):
            target = other
        self._set_panel_document(target, document)

    def replace_text(self, document: Document, text: str) -> None:
        """Replace a document's text and treat it as an edit."""
        document.text = text
        panel = self._panel_for(document)
        if panel is not None:
            panel.sync_text()
        self.controller.on_document_edited(document)

    def set_decorations(
        self,
        document: Document,
        category: HighlightCategory,
        ranges: Sequence[Range],
    ) -> None:
        """Store a document's ranges for a category and paint them if shown."""
        self._decorations.setdefault(document, {})[category] = list(ranges)
        panel = self._panel_for(document)
        if panel is not None:
            panel.set_decorations(category, ranges)

    def show_info(self, message: str) -> None:
        """Show an information notification."""
        self.notify(message)

    def show_error(self, message: str) -> None:
        """Show an error notification."""
        self.notify(message, severity="error")

    # -- Events -------------------------------------------------------------

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Copy editor changes into the document and report the edit."""
        panel = next(
            (p for p in self._panels.values() if p.editor is event.text_area), None
        )
        if panel is None or panel.document is None:
            return
        document = panel.document
        text = event.text_area.text
        if text == document.text:
            return
        document.text = text
        panel.highlight_view.set_source(text)
        self.controller.on_document_edited(document)

    def on_json_editor_app_visible_documents_changed(
        self, message: VisibleDocumentsChanged
    ) -> None:
        """Forward visibility changes to the controller."""
        self.controller.on_visibility_change(self.visible_documents())

    def on_document_panel_focused(self, message: DocumentPanel.Focused) -> None:
        """Track the panel the user is working in."""
        self._set_active_panel("left" if message.panel.column is ViewColumn.ONE else "right")

    # -- Actions ------------------------------------------------------------

    def action_compare(self) -> None:
        """Start comparing two JSON documents."""
        self.controller.activate_comparison()

    def action_filter(self) -> None:
        """Prompt for a JMESPath query and filter the active document."""
        document = self.controller.check_filterable()
        if document is None:
            return
        self.push_screen(
            PromptModal(QUERY_PROMPT, placeholder=QUERY_PLACEHOLDER),
            lambda expression: self.controller.filter_document(document, expression),
        )

    def action_open_file(self) -> None:
        """Prompt for a path and open it in the active panel."""
        self.push_screen(
            PromptModal("Open file", placeholder="path/to/file.json"),
            self._open_path,
        )

    def _open_path(self, path: str | None) -> None:
        if not path:
            return
        try:
            document = load_document(os.path.expanduser(path))
        except (OSError, UnicodeDecodeError) as e:
            self.show_error(f"Error loading file: {e}")
            return
        logger.info("Opened %s", document.path)
        self.documents.append(document)
        self._set_panel_document(self._active_panel_widget(), document)
        self._focus_active_widget()

    def action_new_document(self) -> None:
        """Show a new empty JSON document in the active panel."""
        document = self.open_document(JSON_LANGUAGE, "")
        self._set_panel_document(self._active_panel_widget(), document)
        self._focus_active_widget()

    def action_close_document(self) -> None:
        """Close the active panel's document."""
        panel = self._active_panel_widget()
        document = panel.document
        if document is None:
            return
        self.documents.remove(document)
        self._decorations.pop(document, None)
        self._set_panel_document(panel, None)

    def action_save(self) -> None:
        """Save the active document, prompting for a path if it is untitled."""
        document = self.active_document()
        if document is None:
            self.show_error(NO_ACTIVE_DOCUMENT_MESSAGE)
            return
        if document.is_untitled:
            self.push_screen(
                PromptModal("Save as", placeholder="path/to/file.json"),
                lambda path: self._save(document, path) if path else None,
            )
        else:
            self._save(document, None)

    def _save(self, document: Document, path: str | None) -> None:
        try:
            written = save_document(document, os.path.expanduser(path) if path else None)
        except OSError as e:
            self.show_error(f"Error saving file: {e}")
            return
        panel = self._panel_for(document)
        if panel is not None:
            panel.refresh_header()
        self.show_info(f"Saved {written}")

    # -- Helpers ------------------------------------------------------------

    def _active_panel_widget(self) -> DocumentPanel:
        return self._panels[ViewColumn.ONE if self.is_left_active else ViewColumn.TWO]

    def _panel_for(self, document: Document) -> DocumentPanel | None:
        for panel in self._panels.values():
            if panel.document is document:
                return panel
        return None

    def _set_panel_document(self, panel: DocumentPanel, document: Document | None) -> None:
        """Show a document in a panel and announce the visibility change."""
        panel.show(document)
        if document is not None:
            for category, ranges in self._decorations.get(document, {}).items():
                panel.set_decorations(category, ranges)
        self.post_message(self.VisibleDocumentsChanged())

    def _focus_active_widget(self) -> None:
        """Focus the editor of the active panel."""
        panel = self._active_panel_widget()
        if panel.document is not None:
            panel.editor.focus()


def _shows_json(panel: DocumentPanel) -> bool:
    return panel.document is not None and panel.document.is_json


def configure_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Configure the ``jsoneditor`` logger.

    The TUI owns the terminal, so records are only written when a log file
    is given.

    Args:
        level: Logging level name (e.g., "DEBUG").
        log_file: Path of the log file, or None to discard records.
    """
    package_logger = logging.getLogger("jsoneditor")
    package_logger.setLevel(level.upper())
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    package_logger.addHandler(handler)


def main() -> None:
    """Parse arguments and run the application."""
    parser = argparse.ArgumentParser(
        description="Edit, compare and filter JSON documents in a terminal UI."
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Up to two files to open (left column first)",
    )
    parser.add_argument(
        "--compare",
        "-c",
        action="store_true",
        help="Start comparing the two documents immediately",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write log records to this file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args()

    if len(args.paths) > 2:
        parser.error("at most two paths can be opened")

    # Verify the paths exist
    for path in args.paths:
        if not os.path.exists(path):
            print(f"Error: Path not found: {path}", file=sys.stderr)
            sys.exit(1)

        if not os.access(path, os.R_OK):
            print(f"Error: Permission denied: {path}", file=sys.stderr)
            sys.exit(1)

        if os.path.isdir(path):
            print(f"Error: Path is a directory: {path}", file=sys.stderr)
            sys.exit(1)

    configure_logging(args.log_level, args.log_file)

    app = JsonEditorApp(paths=args.paths, compare=args.compare)
    app.run()


if __name__ == "__main__":
    main()
