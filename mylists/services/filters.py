# mylists/services/filters.py

# SECTION: MODULE DOCSTRING
"""Task filtering and classification.

Pure functions over an ordered sequence of tasks. Nothing is cached: the
screen calls them again on every read so they always reflect the latest
store snapshot. Input order is preserved in every result.
"""

# SECTION: IMPORTS
from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from mylists.helpers._date import is_today
from mylists.models import Task, TaskStatsType

# SECTION: VIEWS


def incomplete_tasks(tasks: Iterable[Task]) -> list[Task]:
    return [task for task in tasks if not task.is_completed]


def todays_tasks(tasks: Iterable[Task], now: datetime | None = None) -> list[Task]:
    """Incomplete tasks whose reminder falls on the current local day."""
    return [
        task
        for task in tasks
        if task.reminder_date is not None and is_today(task.reminder_date, now=now) and not task.is_completed
    ]


def scheduled_tasks(tasks: Iterable[Task]) -> list[Task]:
    return [task for task in tasks if task.reminder_date is not None and not task.is_completed]


def completed_tasks(tasks: Iterable[Task]) -> list[Task]:
    return [task for task in tasks if task.is_completed]


def search_results(tasks: Iterable[Task], query: str) -> list[Task]:
    """Incomplete tasks whose title contains ``query``, ignoring case.

    The caller decides whether an empty query shows results at all; here an
    empty query simply matches every incomplete task.
    """
    needle = query.lower()
    return [task for task in tasks if needle in task.title.lower() and not task.is_completed]


# SECTION: DISPATCH


def tasks_for(tasks: Iterable[Task], stats_type: TaskStatsType, now: datetime | None = None) -> list[Task]:
    """Returns the view behind one of the summary counters."""
    match stats_type:
        case TaskStatsType.ALL:
            return incomplete_tasks(tasks)
        case TaskStatsType.SCHEDULED:
            return scheduled_tasks(tasks)
        case TaskStatsType.TODAY:
            return todays_tasks(tasks, now=now)
        case TaskStatsType.COMPLETED:
            return completed_tasks(tasks)
    raise ValueError(f"Unknown stats type: {stats_type!r}")


def count_by_type(tasks: Iterable[Task], now: datetime | None = None) -> dict[TaskStatsType, int]:
    """Counter values for the four summary tiles."""
    snapshot = list(tasks)
    return {stats_type: len(tasks_for(snapshot, stats_type, now=now)) for stats_type in TaskStatsType}
