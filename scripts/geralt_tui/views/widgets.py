"""Reusable widgets for the geralt views."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Label


class PromptScreen(ModalScreen[str | None]):
    """Single-line prompt; dismisses with the entered text, or None on escape."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=True),
    ]

    DEFAULT_CSS = """
    PromptScreen {
        align: center middle;
    }

    PromptScreen > Vertical {
        width: 60;
        height: auto;
        border: solid $primary;
        padding: 1;
        background: $surface;
    }

    PromptScreen .prompt-label {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    def __init__(self, prompt: str, value: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self._prompt = prompt
        self._value = value

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(self._prompt, id="prompt-label", classes="prompt-label")
            yield Input(value=self._value, id="prompt-input")

    def on_mount(self) -> None:
        self.query_one("#prompt-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)
