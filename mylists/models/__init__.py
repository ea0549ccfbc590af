# mylists/models/__init__.py

"""Data models for task lists, tasks and summary counters."""

from .stats import TaskStatsType
from .task import ListColor, MyListsModel, Task, TaskList

__all__ = [
    "ListColor",
    "MyListsModel",
    "Task",
    "TaskList",
    "TaskStatsType",
]
