# mylists/ui/widgets/stats_view.py

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.containers import Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Digits, Label

from mylists.helpers._logger import log
from mylists.models import TaskStatsType


class TaskStatsView(Vertical, can_focus=True):
    """Summary tile: icon, title and a task count. Clicking it selects it."""

    DEFAULT_CSS = """
    TaskStatsView {
        height: auto;
        width: 1fr;
        padding: 0 1;
        margin: 0 1 1 0;
        background: $panel;
        border: round $primary-background;

        Label { width: auto; text-style: bold; color: $text-muted; }
        Digits { width: auto; color: $accent; }
    }

    TaskStatsView:focus {
        border: round $accent;
    }

    TaskStatsView:hover {
        background: $boost;
    }
    """

    BINDINGS = [Binding("enter", "select", "Open", show=False)]

    count: reactive[int] = reactive(0)

    class Selected(Message):
        """Posted when the tile is clicked or activated with Enter."""

        def __init__(self, stats_view: "TaskStatsView") -> None:
            self.stats_view = stats_view
            super().__init__()

        @property
        def stats_type(self) -> TaskStatsType | None:
            return self.stats_view.stats_type

    def __init__(
        self,
        icon: str,
        title: str,
        count: int = 0,
        stats_type: TaskStatsType | None = None,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.stats_icon = icon
        self.stats_title = title
        self.stats_type = stats_type
        self.set_reactive(TaskStatsView.count, count)

    def compose(self) -> ComposeResult:
        yield Label(f"{self.stats_icon} {self.stats_title}", classes="stats-title")
        yield Digits(str(self.count), classes="stats-count")

    def watch_count(self, value: int) -> None:
        try:
            self.query_one(".stats-count", Digits).update(str(value))
        except NoMatches as e:
            log.error(f"Error in watch_count for '{self.stats_title}': {e}")
        self.tooltip = f"{self.stats_title}: {value}"

    def on_click(self, event: events.Click) -> None:
        self.post_message(self.Selected(self))

    def action_select(self) -> None:
        self.post_message(self.Selected(self))
