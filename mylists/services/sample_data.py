# mylists/services/sample_data.py

"""Sample lists and tasks for a first run (``--seed``) and for demos."""

from datetime import datetime, timedelta

from mylists.helpers._date import get_local_timezone
from mylists.helpers._logger import log
from mylists.models import ListColor, Task, TaskList
from mylists.services.store import TaskStore


def seed_sample_data(store: TaskStore, now: datetime | None = None) -> bool:
    """Adds a few lists and tasks when the store is empty.

    Returns:
        True if data was added, False if the store already had lists.
    """
    if store.task_lists:
        log.info("Store already has lists, skipping sample data")
        return False

    now = now or datetime.now(get_local_timezone())
    reminders = store.add_list(TaskList(name="Reminders", color=ListColor.BLUE))
    groceries = store.add_list(TaskList(name="Groceries", color=ListColor.GREEN, icon=":shopping_trolley:"))
    work = store.add_list(TaskList(name="Work", color=ListColor.ORANGE))

    for task in (
        Task(title="Pay bills", reminder_date=now.replace(hour=18, minute=0, second=0, microsecond=0), list_id=reminders.id),
        Task(title="Call the dentist", reminder_date=now + timedelta(days=2), list_id=reminders.id),
        Task(title="Renew passport", is_completed=True, list_id=reminders.id),
        Task(title="Buy milk", list_id=groceries.id),
        Task(title="Buy coffee :coffee:", list_id=groceries.id),
        Task(title="Send weekly report", reminder_date=now + timedelta(days=4), list_id=work.id),
        Task(title="Review pull requests", is_completed=True, list_id=work.id),
    ):
        store.add_task(task)

    log.success(f"Seeded {len(store.task_lists)} list(s) and {len(store.tasks)} task(s)")
    return True
