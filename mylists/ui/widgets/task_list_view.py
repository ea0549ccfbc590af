# mylists/ui/widgets/task_list_view.py

from collections.abc import Iterable

from rich.text import Text
from textual.widgets import DataTable

from mylists.helpers._logger import log
from mylists.models import Task


class TaskListView(DataTable):
    """Table of tasks: completion mark, title and reminder."""

    DEFAULT_CSS = """
    TaskListView {
        height: 1fr;
    }
    """

    def __init__(self, tasks: Iterable[Task] = (), id: str | None = None, classes: str | None = None) -> None:
        super().__init__(id=id, classes=classes, cursor_type="row", zebra_stripes=True)
        self._task_rows: list[Task] = list(tasks)

    def on_mount(self) -> None:
        self.add_columns("", "Task", "Reminder")
        self._render_rows()

    @property
    def tasks(self) -> list[Task]:
        return list(self._task_rows)

    @property
    def selected_task(self) -> Task | None:
        """The task under the cursor, if any."""
        if not self._task_rows or not 0 <= self.cursor_row < len(self._task_rows):
            return None
        return self._task_rows[self.cursor_row]

    def set_tasks(self, tasks: Iterable[Task]) -> None:
        """Replaces the rows, keeping the cursor on the same row index when possible."""
        self._task_rows = list(tasks)
        if self.is_mounted:
            self._render_rows()

    def _render_rows(self) -> None:
        cursor_row = self.cursor_row
        self.clear()
        for task in self._task_rows:
            mark = Text("●", style="green") if task.is_completed else Text("○", style="dim")
            title = Text(task.title, style="dim strike" if task.is_completed else "")
            reminder = Text(task.reminder_display, style="italic")
            self.add_row(mark, title, reminder, key=task.id)
        if self._task_rows:
            self.move_cursor(row=min(cursor_row, len(self._task_rows) - 1))
        log.debug(f"TaskListView '{self.id}' rendered {len(self._task_rows)} task(s)")

