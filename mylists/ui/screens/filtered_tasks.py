# mylists/ui/screens/filtered_tasks.py

from collections.abc import Iterable

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from mylists.models import Task
from mylists.ui.widgets import TaskListView


class FilteredTasksScreen(Screen):
    """Read-only list of tasks behind one of the summary counters."""

    BINDINGS = [Binding("escape", "back", "Back")]

    def __init__(self, tasks: Iterable[Task], title: str) -> None:
        super().__init__()
        self.filtered_tasks = list(tasks)
        self.title = title

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(f"[b]{self.title}[/b]  ({len(self.filtered_tasks)})", id="filtered-title")
        yield TaskListView(self.filtered_tasks, id="filtered-tasks")
        yield Footer()

    def action_back(self) -> None:
        self.dismiss()
