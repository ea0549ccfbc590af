# mylists/ui/widgets/task_list_cell.py

from rich.text import Text
from textual.app import ComposeResult
from textual.widgets import ListItem, Static

from mylists.models import TaskList


class TaskListCellView(ListItem):
    """Row of the lists screen: coloured icon, list name and open task count."""

    DEFAULT_CSS = """
    TaskListCellView {
        height: 1;
        padding: 0 1;
    }
    """

    def __init__(self, task_list: TaskList, task_count: int = 0) -> None:
        super().__init__()
        self.task_list = task_list
        self.task_count = task_count

    def compose(self) -> ComposeResult:
        yield Static(self.render_label(), classes="task-list-label")

    def render_label(self) -> Text:
        label = Text()
        label.append(f"{self.task_list.icon} ", style=f"bold {self.task_list.color.value}")
        label.append(self.task_list.name)
        label.append(f"  {self.task_count}", style="dim")
        return label
