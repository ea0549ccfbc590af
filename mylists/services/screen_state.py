# mylists/services/screen_state.py

# SECTION: MODULE DOCSTRING
"""State behind the "My Lists" screen.

Holds the transient selection slots (selected list, active counter, active
sheet, search text) and exposes the derived task views, recomputed from the
store on every read. The Textual screen renders from this object; it has no
Textual dependency so it can be exercised directly.
"""

# SECTION: IMPORTS
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from mylists.helpers._logger import log
from mylists.models import Task, TaskList, TaskStatsType
from mylists.services import filters
from mylists.services.store import TaskStore

# SECTION: SHEETS


@dataclass(frozen=True)
class NewListSheet:
    """List editor opened in create mode."""

    @property
    def id(self) -> int:
        return 1


@dataclass(frozen=True)
class EditListSheet:
    """List editor opened for an existing list."""

    task_list: TaskList

    @property
    def id(self) -> int:
        return hash(self.task_list)


TaskListSheet = NewListSheet | EditListSheet


# SECTION: SCREEN MODEL


# KLASS: TaskListsScreenModel
class TaskListsScreenModel:
    """Selection slots and derived views for the lists screen.

    The slots are independent: any combination may be set at once.
    """

    def __init__(self, store: TaskStore) -> None:
        self.store = store
        self.selected_list: TaskList | None = None
        self.active_stats: TaskStatsType | None = None
        self.active_sheet: TaskListSheet | None = None
        self.search: str = ""

    # --- Collections ---

    @property
    def task_lists(self) -> list[TaskList]:
        return self.store.task_lists

    @property
    def tasks(self) -> list[Task]:
        return self.store.tasks

    # --- Derived views ---

    @property
    def incomplete_tasks(self) -> list[Task]:
        return filters.incomplete_tasks(self.tasks)

    @property
    def todays_tasks(self) -> list[Task]:
        return filters.todays_tasks(self.tasks)

    @property
    def scheduled_tasks(self) -> list[Task]:
        return filters.scheduled_tasks(self.tasks)

    @property
    def completed_tasks(self) -> list[Task]:
        return filters.completed_tasks(self.tasks)

    @property
    def search_results(self) -> list[Task] | None:
        """Matches for the current search, or None when no search is active."""
        if not self.search:
            return None
        return filters.search_results(self.tasks, self.search)

    @property
    def is_search_overlay_visible(self) -> bool:
        return bool(self.search)

    def tasks_for(self, stats_type: TaskStatsType, now: datetime | None = None) -> list[Task]:
        return filters.tasks_for(self.tasks, stats_type, now=now)

    def counts(self, now: datetime | None = None) -> dict[TaskStatsType, int]:
        return filters.count_by_type(self.tasks, now=now)

    def task_count(self, task_list: TaskList) -> int:
        """Number of incomplete tasks in ``task_list`` (shown in its row)."""
        return len(filters.incomplete_tasks(self.store.tasks_in(task_list)))

    # --- Deletion ---

    def delete_lists(self, indexes: Iterable[int]) -> TaskList | None:
        """Deletes the list at the first of ``indexes``.

        Only the first (lowest) index is honoured; the rest are ignored.

        Returns:
            The deleted list, or None when nothing was deleted.
        """
        ordered = sorted(set(indexes))
        if not ordered:
            return None

        index, ignored = ordered[0], ordered[1:]
        if ignored:
            log.debug(f"Multi-delete requested, ignoring indexes {ignored}")

        lists = self.task_lists
        if not 0 <= index < len(lists):
            log.warning(f"Delete index {index} out of range for {len(lists)} list(s)")
            return None

        task_list = lists[index]
        self.store.delete(task_list)
        if self.selected_list == task_list:
            self.selected_list = None
        return task_list

    # --- Selection / navigation ---

    def select_list(self, task_list: TaskList | None) -> None:
        self.selected_list = task_list

    def select_stats(self, stats_type: TaskStatsType | None) -> None:
        self.active_stats = stats_type

    def open_new_list(self) -> NewListSheet:
        self.active_sheet = NewListSheet()
        return self.active_sheet

    def open_edit_list(self, task_list: TaskList) -> EditListSheet:
        self.active_sheet = EditListSheet(task_list)
        return self.active_sheet

    def dismiss_sheet(self) -> None:
        self.active_sheet = None

    def set_search(self, query: str) -> None:
        self.search = query
