# mylists/ui/screens/task_list_detail.py

from pydantic import ValidationError
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Header, Input

from mylists.helpers._logger import log
from mylists.models import Task, TaskList
from mylists.services.store import StoreError, TaskStore
from mylists.ui.widgets import TaskListView


class TaskListDetailScreen(Screen):
    """Tasks of one list: add, complete and delete them."""

    DEFAULT_CSS = """
    #new-task {
        height: auto;
    }

    #new-task-title {
        width: 2fr;
    }

    #new-task-reminder {
        width: 1fr;
    }
    """

    AUTO_FOCUS = "#detail-tasks"

    BINDINGS = [
        Binding("escape", "back", "Back"),
        Binding("space", "toggle_completed", "Complete"),
        Binding("d", "delete_task", "Delete task"),
        Binding("a", "focus_new_task", "Add task"),
    ]

    def __init__(self, store: TaskStore, task_list: TaskList) -> None:
        super().__init__()
        self.store = store
        self.task_list = task_list
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield TaskListView(self.store.tasks_in(self.task_list), id="detail-tasks")
        with Horizontal(id="new-task"):
            yield Input(placeholder="New task title", id="new-task-title")
            yield Input(placeholder="Reminder (YYYY-MM-DD HH:MM)", id="new-task-reminder")
        yield Footer()

    def on_mount(self) -> None:
        self.title = self.task_list.name
        self._unsubscribe = self.store.subscribe(lambda store: self.refresh_tasks())

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def refresh_tasks(self) -> None:
        current = self.store.get_list(self.task_list.id)
        if current is not None:
            self.task_list = current
            self.title = current.name
        self.query_one("#detail-tasks", TaskListView).set_tasks(self.store.tasks_in(self.task_list))

    # --- Actions ---

    def action_back(self) -> None:
        self.dismiss()

    def action_focus_new_task(self) -> None:
        self.query_one("#new-task-title", Input).focus()

    def action_toggle_completed(self) -> None:
        task = self.query_one("#detail-tasks", TaskListView).selected_task
        if task is None:
            return
        try:
            self.store.toggle_completed(task)
        except StoreError as e:
            log.error(f"Could not toggle task {task!r}: {e}")
            self.notify(str(e), severity="error")

    def action_delete_task(self) -> None:
        task = self.query_one("#detail-tasks", TaskListView).selected_task
        if task is None:
            return
        try:
            self.store.delete(task)
        except StoreError as e:
            log.error(f"Could not delete task {task!r}: {e}")
            self.notify(str(e), severity="error")

    @on(Input.Submitted, "#new-task-title, #new-task-reminder")
    def add_task(self) -> None:
        title_input = self.query_one("#new-task-title", Input)
        reminder_input = self.query_one("#new-task-reminder", Input)
        if not title_input.value.strip():
            title_input.focus()
            return

        try:
            task = Task(title=title_input.value, reminder_date=reminder_input.value or None, list_id=self.task_list.id)
        except ValidationError as e:
            log.warning(f"Rejected new task: {e}")
            self.notify("Invalid reminder date", severity="error")
            reminder_input.focus()
            return

        self.store.add_task(task)
        title_input.value = ""
        reminder_input.value = ""
        title_input.focus()
