# mylists/ui/screens/task_lists_screen.py

# SECTION: MODULE DOCSTRING
"""The "My Lists" screen.

Summary counters, the user's lists, search-as-you-type over incomplete tasks,
and the list editor sheet. All state lives in ``TaskListsScreenModel``; this
screen renders it and turns user input into model calls and navigation.
"""

# SECTION: IMPORTS
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, ListView

from mylists.helpers._logger import log
from mylists.models import TaskList, TaskStatsType
from mylists.services.screen_state import TaskListsScreenModel
from mylists.services.store import StoreError, TaskStore
from mylists.ui.modals.add_task_list import AddTaskListScreen
from mylists.ui.screens.filtered_tasks import FilteredTasksScreen
from mylists.ui.screens.task_list_detail import TaskListDetailScreen
from mylists.ui.widgets import TaskListCellView, TaskListView, TaskStatsView

STATS_IDS = {
    TaskStatsType.TODAY: "stats-today",
    TaskStatsType.SCHEDULED: "stats-scheduled",
    TaskStatsType.ALL: "stats-all",
    TaskStatsType.COMPLETED: "stats-completed",
}


# KLASS: TaskListsScreen
class TaskListsScreen(Screen):
    """Lists overview with counters, search and the list editor."""

    DEFAULT_CSS = """
    #lists-content {
        height: 1fr;
    }

    #stats-grid {
        grid-size: 2 2;
        grid-rows: auto;
        height: auto;
        padding: 1 1 0 1;
    }

    #task-lists {
        height: 1fr;
    }

    #add-list {
        dock: bottom;
        width: 100%;
    }

    #search-overlay {
        display: none;
        height: 1fr;
        background: $background;
    }
    """

    AUTO_FOCUS = "#task-lists"

    BINDINGS = [
        Binding("n", "new_list", "Add List"),
        Binding("e", "edit_list", "Edit List"),
        Binding("d", "delete_list", "Delete List"),
        Binding("slash", "focus_search", "Search"),
        Binding("escape", "clear_search", "Clear search", show=False),
    ]

    def __init__(self, store: TaskStore) -> None:
        super().__init__()
        self.store = store
        self.model = TaskListsScreenModel(store)
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="Search", id="search")
        with Vertical(id="lists-content"):
            with Grid(id="stats-grid"):
                for stats_type, widget_id in STATS_IDS.items():
                    yield TaskStatsView(stats_type.icon, stats_type.title, stats_type=stats_type, id=widget_id)
            yield ListView(id="task-lists")
            yield Button("Add List", id="add-list")
        yield TaskListView(id="search-overlay")
        yield Footer()

    async def on_mount(self) -> None:
        self.title = "My Lists"
        self._unsubscribe = self.store.subscribe(self._store_changed)
        await self.refresh_view()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _store_changed(self, store: TaskStore) -> None:
        self.call_later(self.refresh_view)

    # --- Rendering ---

    async def refresh_view(self) -> None:
        """Re-renders counters, list rows and the search overlay from the model."""
        counts = self.model.counts()
        for stats_type, widget_id in STATS_IDS.items():
            self.query_one(f"#{widget_id}", TaskStatsView).count = counts[stats_type]

        list_view = self.query_one("#task-lists", ListView)
        index = list_view.index
        await list_view.clear()
        await list_view.extend(TaskListCellView(task_list, self.model.task_count(task_list)) for task_list in self.model.task_lists)
        if self.model.task_lists:
            list_view.index = min(index or 0, len(self.model.task_lists) - 1)

        self._refresh_search_overlay()

    def _refresh_search_overlay(self) -> None:
        overlay = self.query_one("#search-overlay", TaskListView)
        results = self.model.search_results
        overlay.display = results is not None
        self.query_one("#lists-content").display = results is None
        overlay.set_tasks(results or [])

    def _highlighted_list(self) -> TaskList | None:
        item = self.query_one("#task-lists", ListView).highlighted_child
        if isinstance(item, TaskListCellView):
            return item.task_list
        return None

    # --- Search ---

    @on(Input.Changed, "#search")
    def _search_changed(self, event: Input.Changed) -> None:
        self.model.set_search(event.value)
        self._refresh_search_overlay()

    def action_focus_search(self) -> None:
        self.query_one("#search", Input).focus()

    def action_clear_search(self) -> None:
        search = self.query_one("#search", Input)
        search.value = ""
        self.query_one("#task-lists", ListView).focus()

    # --- Navigation ---

    @on(TaskStatsView.Selected)
    def _stats_selected(self, message: TaskStatsView.Selected) -> None:
        stats_type = message.stats_type
        if stats_type is None:
            return
        self.model.select_stats(stats_type)
        log.debug(f"Opening filtered view '{stats_type.title}'")
        self.app.push_screen(
            FilteredTasksScreen(self.model.tasks_for(stats_type), stats_type.title),
            callback=lambda _: self.model.select_stats(None),
        )

    @on(ListView.Selected, "#task-lists")
    def _list_selected(self, event: ListView.Selected) -> None:
        if not isinstance(event.item, TaskListCellView):
            return
        self.model.select_list(event.item.task_list)
        self.app.push_screen(
            TaskListDetailScreen(self.store, event.item.task_list),
            callback=lambda _: self.model.select_list(None),
        )

    # --- Sheets ---

    @on(Button.Pressed, "#add-list")
    def _add_list_pressed(self) -> None:
        self.action_new_list()

    def action_new_list(self) -> None:
        self.model.open_new_list()
        self.app.push_screen(AddTaskListScreen(self.store), callback=self._sheet_dismissed)

    def action_edit_list(self) -> None:
        task_list = self._highlighted_list()
        if task_list is None:
            return
        self.model.open_edit_list(task_list)
        self.app.push_screen(AddTaskListScreen(self.store, task_list), callback=self._sheet_dismissed)

    def _sheet_dismissed(self, result: TaskList | None) -> None:
        if result is not None:
            log.info(f"List sheet saved {result!r}")
        self.model.dismiss_sheet()

    # --- Deletion ---

    def action_delete_list(self) -> None:
        index = self.query_one("#task-lists", ListView).index
        if index is None:
            return
        try:
            deleted = self.model.delete_lists([index])
        except StoreError as e:
            log.error(f"Could not delete list at {index}: {e}")
            self.notify(str(e), severity="error")
            return
        if deleted is not None:
            self.notify(f"Deleted '{deleted.name}'")
