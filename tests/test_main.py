# tests/test_main.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mylists.__main__ import main
from mylists.services.sample_data import seed_sample_data
from mylists.services.store import TaskStore


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("MYLISTS_LOG_LEVEL", raising=False)
    monkeypatch.setenv("MYLISTS_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.chdir(tmp_path)


def test_seed_and_summary(tmp_path: Path) -> None:
    data_file = tmp_path / "lists.json"

    assert main(["--data-file", str(data_file), "--seed", "--summary"]) == 0

    data = json.loads(data_file.read_text(encoding="utf-8"))
    assert [item["name"] for item in data["lists"]] == ["Reminders", "Groceries", "Work"]
    assert len(data["tasks"]) == 7


def test_seed_only_fills_an_empty_store(tmp_path: Path) -> None:
    data_file = tmp_path / "lists.json"
    main(["--data-file", str(data_file), "--seed", "--summary"])

    assert main(["--data-file", str(data_file), "--seed", "--summary"]) == 0

    data = json.loads(data_file.read_text(encoding="utf-8"))
    assert len(data["lists"]) == 3


def test_corrupt_data_file_exits_with_error(tmp_path: Path) -> None:
    data_file = tmp_path / "lists.json"
    data_file.write_text("[]", encoding="utf-8")

    assert main(["--data-file", str(data_file), "--summary"]) == 1


def test_seed_sample_data_skips_populated_store(seeded_store: TaskStore) -> None:
    assert seed_sample_data(seeded_store) is False
    assert len(seeded_store.task_lists) == 2


def test_seed_sample_data_counts(store: TaskStore, now) -> None:
    assert seed_sample_data(store, now=now) is True

    names = [item.name for item in store.task_lists]
    assert names == ["Reminders", "Groceries", "Work"]
    assert len(store.tasks) == 7
    assert sum(not task.is_completed for task in store.tasks) == 5
