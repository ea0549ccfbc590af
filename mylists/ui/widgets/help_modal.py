from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static


class HelpModal(ModalScreen):
    """Modal screen to show keyboard help."""

    DEFAULT_CSS = """
    HelpModal {
        align: center middle;
    }

    #help-list {
        width: 50;
        height: auto;
        padding: 1 2;
        border: round $accent;
        background: $panel;
    }

    #help-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    def __init__(self, bindings: list[Binding]) -> None:
        super().__init__()
        self.help_bindings = [binding for binding in bindings if binding.description]

    def compose(self) -> ComposeResult:
        yield Vertical(
            Static("Keyboard Shortcuts", id="help-title"),
            *(Static(f"[b]{binding.key}[/b]: {binding.description}", classes="help-item") for binding in self.help_bindings),
            id="help-list",
        )

    def on_key(self, event: events.Key) -> None:
        """Close help on Escape or '?'."""
        if event.key in ("escape", "question_mark"):
            event.stop()
            self.dismiss()
