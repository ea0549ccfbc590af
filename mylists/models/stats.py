# mylists/models/stats.py

"""Summary counter categories shown at the top of the lists screen."""

from enum import Enum


# ENUM: TaskStatsType
class TaskStatsType(int, Enum):
    TODAY = 0
    SCHEDULED = 1
    ALL = 2
    COMPLETED = 3

    @property
    def title(self) -> str:
        return _TITLES[self]

    @property
    def icon(self) -> str:
        return _ICONS[self]


_TITLES = {
    TaskStatsType.TODAY: "Today",
    TaskStatsType.SCHEDULED: "Scheduled",
    TaskStatsType.ALL: "All",
    TaskStatsType.COMPLETED: "Completed",
}

_ICONS = {
    TaskStatsType.TODAY: "📅",
    TaskStatsType.SCHEDULED: "🗓",
    TaskStatsType.ALL: "📥",
    TaskStatsType.COMPLETED: "✔",
}
