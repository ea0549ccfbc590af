# mylists/ui/modals/add_task_list.py

from pydantic import ValidationError
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Select, Static

from mylists.helpers._logger import log
from mylists.models import ListColor, TaskList
from mylists.services.store import StoreError, TaskStore


class AddTaskListScreen(ModalScreen[TaskList | None]):
    """List editor sheet.

    Without ``task_list`` it creates a new list; with one it edits that list's
    name and colour. Dismisses with the saved list, or None when cancelled.
    """

    DEFAULT_CSS = """
    AddTaskListScreen {
        align: center middle;
    }

    #sheet {
        width: 60;
        height: auto;
        padding: 1 2;
        border: thick $accent;
        background: $surface;
    }

    #sheet-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #sheet-actions {
        height: auto;
        align: right middle;
        margin-top: 1;
    }

    #sheet-actions Button {
        margin-left: 1;
    }
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, store: TaskStore, task_list: TaskList | None = None) -> None:
        super().__init__()
        self.store = store
        self.task_list = task_list

    @property
    def is_edit_mode(self) -> bool:
        return self.task_list is not None

    def compose(self) -> ComposeResult:
        name = self.task_list.name if self.task_list else ""
        color = self.task_list.color if self.task_list else ListColor.BLUE
        with Vertical(id="sheet"):
            yield Static("Edit List" if self.is_edit_mode else "New List", id="sheet-title")
            yield Input(value=name, placeholder="List Name", id="list-name")
            yield Select(
                [(item.label, item) for item in ListColor],
                value=color,
                allow_blank=False,
                id="list-color",
            )
            with Horizontal(id="sheet-actions"):
                yield Button("Cancel", id="cancel")
                yield Button("Done", id="done", variant="primary", disabled=not name.strip())

    @on(Input.Changed, "#list-name")
    def _name_changed(self, event: Input.Changed) -> None:
        self.query_one("#done", Button).disabled = not event.value.strip()

    @on(Input.Submitted, "#list-name")
    def _name_submitted(self, event: Input.Submitted) -> None:
        self.save()

    @on(Button.Pressed, "#done")
    def _done_pressed(self) -> None:
        self.save()

    @on(Button.Pressed, "#cancel")
    def _cancel_pressed(self) -> None:
        self.action_cancel()

    def action_cancel(self) -> None:
        self.dismiss(None)

    def save(self) -> None:
        """Creates or updates the list and closes the sheet."""
        name = self.query_one("#list-name", Input).value
        color = self.query_one("#list-color", Select).value
        if not name.strip():
            self.notify("List name cannot be empty", severity="warning")
            return

        try:
            if self.task_list is None:
                saved = self.store.add_list(TaskList(name=name, color=color))
            else:
                saved = self.store.update_list(self.task_list, name=name, color=color)
        except (ValidationError, StoreError) as e:
            log.error(f"Could not save list '{name}': {e}")
            self.notify(f"Could not save list: {e}", severity="error")
            return

        self.dismiss(saved)
