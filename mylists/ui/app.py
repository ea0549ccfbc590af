# mylists/ui/app.py
from textual.app import App
from textual.binding import Binding

from mylists.helpers._logger import log
from mylists.services.store import TaskStore
from mylists.ui.screens.task_lists_screen import TaskListsScreen
from mylists.ui.widgets import HelpModal


class MyListsApp(App):
    """Textual app hosting the lists screen and its navigation stack."""

    TITLE = "My Lists"
    BINDINGS = [
        Binding(key="q", action="quit", description="Quit"),
        Binding(key="question_mark", action="help", description="Help"),
    ]

    def __init__(self, store: TaskStore) -> None:
        super().__init__()
        self.store = store

    def on_mount(self) -> None:
        log.info(f"Starting with {len(self.store.task_lists)} list(s) and {len(self.store.tasks)} task(s)")
        self.push_screen(TaskListsScreen(self.store))

    def action_help(self) -> None:
        if isinstance(self.screen, HelpModal):
            return
        bindings = [binding for binding in (*self.screen.BINDINGS, *self.BINDINGS) if isinstance(binding, Binding)]
        self.push_screen(HelpModal(bindings))
