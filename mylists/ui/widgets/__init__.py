from .help_modal import HelpModal
from .stats_view import TaskStatsView
from .task_list_cell import TaskListCellView
from .task_list_view import TaskListView

__all__ = ["HelpModal", "TaskListCellView", "TaskListView", "TaskStatsView"]
