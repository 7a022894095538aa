"""Modal screen prompting the user for a single line of input."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Label


class PromptModal(ModalScreen[str | None]):
    """A modal screen with a prompt and one input line.

    Dismisses with the entered text on Enter, or None on Escape.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    CSS = """
    PromptModal {
        align: center middle;
    }

    PromptModal > Vertical {
        width: 70%;
        height: auto;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    PromptModal .prompt-label {
        width: 100%;
        padding: 0 0 1 0;
        text-style: bold;
    }

    PromptModal .close-hint {
        width: 100%;
        padding: 1 0 0 0;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        prompt: str,
        placeholder: str = "",
        value: str = "",
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the prompt modal.

        Args:
            prompt: Text shown above the input (e.g., "Enter JMESPath query").
            placeholder: Hint shown while the input is empty.
            value: Initial input value.
            name: Optional name for the widget.
            id: Optional ID for the widget.
            classes: Optional CSS classes.
        """
        super().__init__(name=name, id=id, classes=classes)
        self.prompt = prompt
        self.placeholder = placeholder
        self.initial_value = value

    def compose(self) -> ComposeResult:
        """Compose the modal content."""
        with Vertical():
            yield Label(self.prompt, classes="prompt-label")
            yield Input(value=self.initial_value, placeholder=self.placeholder)
            yield Label("Press [ENTER] to confirm or [ESC] to cancel", classes="close-hint")

    def on_mount(self) -> None:
        """Focus the input line."""
        self.query_one(Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Close the modal with the entered text."""
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        """Close the modal without a value."""
        self.dismiss(None)
