# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from mylists.helpers._date import get_local_timezone
from mylists.models import Task, TaskList
from mylists.services.store import TaskStore


@pytest.fixture()
def now() -> datetime:
    """A fixed local midday, far from midnight so day arithmetic is stable."""
    return datetime(2026, 10, 19, 12, 0, tzinfo=get_local_timezone())


@pytest.fixture()
def example_tasks(now: datetime) -> list[Task]:
    return [
        Task(title="Buy milk"),
        Task(title="Pay bills", reminder_date=now),
        Task(title="Old", is_completed=True),
    ]


@pytest.fixture()
def store() -> TaskStore:
    """In-memory store (no data file)."""
    return TaskStore()


@pytest.fixture()
def file_store(tmp_path: Path) -> TaskStore:
    return TaskStore(tmp_path / "lists.json")


@pytest.fixture()
def seeded_store(store: TaskStore) -> TaskStore:
    """Two lists: "Home" with two open tasks, "Archive" with one completed task.

    "Pay bills" is due at noon today, so it counts as today and scheduled.
    """
    home = store.add_list(TaskList(name="Home"))
    archive = store.add_list(TaskList(name="Archive"))
    store.add_task(Task(title="Buy milk", list_id=home.id))
    store.add_task(Task(title="Pay bills", reminder_date=datetime.now(get_local_timezone()).replace(hour=12, minute=0), list_id=home.id))
    store.add_task(Task(title="Old", is_completed=True, list_id=archive.id))
    return store


@pytest.fixture()
def abc_store(store: TaskStore) -> TaskStore:
    for name in ("A", "B", "C"):
        store.add_list(TaskList(name=name))
    return store
