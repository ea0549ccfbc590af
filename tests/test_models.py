# tests/test_models.py

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from mylists.models import ListColor, Task, TaskList, TaskStatsType


def test_task_list_requires_a_name() -> None:
    with pytest.raises(ValidationError):
        TaskList(name="   ")


def test_task_list_name_is_stripped_and_emoji_codes_replaced() -> None:
    task_list = TaskList(name="  Groceries :coffee: ")

    assert task_list.name.startswith("Groceries")
    assert ":coffee:" not in task_list.name
    assert task_list.color == ListColor.BLUE


def test_rename_is_validated_on_assignment() -> None:
    task_list = TaskList(name="Home")

    with pytest.raises(ValidationError):
        task_list.name = ""


def test_ids_are_generated_and_identify_models() -> None:
    first = TaskList(name="Home")
    second = TaskList(name="Home")
    renamed = first.model_copy(update={"name": "House"})

    assert first.id and second.id and first.id != second.id
    assert first != second
    assert first == renamed
    assert hash(first) == hash(renamed)


def test_empty_id_is_replaced() -> None:
    assert TaskList.model_validate({"id": "", "name": "Home"}).id


def test_task_accepts_camel_case_keys() -> None:
    task = Task.model_validate({"title": "Call mom", "isCompleted": True, "listId": "abc"})

    assert task.is_completed is True
    assert task.list_id == "abc"
    assert task.reminder_date is None
    assert not task.has_reminder


def test_task_reminder_from_iso_string_with_offset() -> None:
    task = Task(title="Standup", reminder_date="2026-10-19T09:30:00Z")

    assert task.reminder_date == datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)


def test_task_reminder_naive_string_is_local_time() -> None:
    task = Task(title="Standup", reminder_date="2026-10-19 09:30")

    assert task.reminder_date is not None
    assert task.reminder_date.tzinfo is not None
    assert (task.reminder_date.hour, task.reminder_date.minute) == (9, 30)


def test_task_reminder_rejects_garbage() -> None:
    with pytest.raises(ValidationError):
        Task(title="Standup", reminder_date="next tuesday-ish")


def test_blank_reminder_means_none() -> None:
    assert Task(title="Someday", reminder_date="  ").reminder_date is None


def test_reminder_display_is_empty_without_reminder() -> None:
    assert Task(title="Someday").reminder_display == ""


def test_task_dump_round_trips_through_json_mode() -> None:
    task = Task(title="Pay bills", reminder_date="2026-10-19T18:00:00+00:00", list_id="list-1")

    restored = Task.model_validate(task.model_dump(mode="json"))

    assert restored == task
    assert restored.reminder_date == task.reminder_date
    assert restored.list_id == "list-1"


def test_stats_type_titles_and_ids() -> None:
    assert [stats_type.title for stats_type in TaskStatsType] == ["Today", "Scheduled", "All", "Completed"]
    assert [int(stats_type) for stats_type in TaskStatsType] == [0, 1, 2, 3]
