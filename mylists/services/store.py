# mylists/services/store.py

# SECTION: MODULE DOCSTRING
"""Persistence and query layer for task lists and tasks.

``TaskStore`` owns the ordered collections, persists them to a JSON file and
notifies subscribers synchronously after every change. Readers always get a
fresh snapshot list, so callers can filter freely without touching the
store's state.
"""

# SECTION: IMPORTS
from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from mylists.helpers._json import load_json, save_json
from mylists.helpers._logger import log
from mylists.models import Task, TaskList

# SECTION: TYPES
Subscriber = Callable[["TaskStore"], None]
STORE_FORMAT_VERSION = 1


# SECTION: EXCEPTIONS


class StoreError(Exception):
    """Base error for store operations."""


class StoreLoadError(StoreError):
    """The data file exists but cannot be read."""


class EntityNotFoundError(StoreError):
    """The entity is not (or no longer) in the store."""

    def __init__(self, entity: TaskList | Task) -> None:
        self.entity = entity
        super().__init__(f"{type(entity).__name__} '{entity.id}' not found in store")


# SECTION: STORE


# KLASS: TaskStore
class TaskStore:
    """Ordered, observable collections of task lists and tasks.

    Args:
        path: JSON data file. ``None`` keeps everything in memory.
        autosave: Save to ``path`` after every mutation.
    """

    def __init__(self, path: Path | None = None, autosave: bool = True) -> None:
        self.path = path
        self.autosave = autosave
        self._lists: list[TaskList] = []
        self._tasks: list[Task] = []
        self._subscribers: list[Subscriber] = []

    # --- Queries ---

    @property
    def task_lists(self) -> list[TaskList]:
        return list(self._lists)

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def tasks_in(self, task_list: TaskList) -> list[Task]:
        """Tasks that belong to ``task_list``, in store order."""
        return [task for task in self._tasks if task.list_id == task_list.id]

    def get_list(self, list_id: str) -> TaskList | None:
        return next((item for item in self._lists if item.id == list_id), None)

    def get_task(self, task_id: str) -> Task | None:
        return next((item for item in self._tasks if item.id == task_id), None)

    # --- Subscriptions ---

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Registers ``callback`` to run after every change.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _changed(self) -> None:
        if self.autosave and self.path is not None:
            self.save()
        for callback in list(self._subscribers):
            callback(self)

    # --- Mutations ---

    def add_list(self, task_list: TaskList) -> TaskList:
        self._lists.append(task_list)
        log.info(f"Added list {task_list!r}")
        self._changed()
        return task_list

    def update_list(self, task_list: TaskList, **changes: Any) -> TaskList:
        """Applies field changes to a stored list. Nothing changes if any field is invalid."""
        stored = self.get_list(task_list.id)
        if stored is None:
            raise EntityNotFoundError(task_list)
        self._apply_changes(stored, changes)
        log.info(f"Updated list {stored!r}: {sorted(changes)}")
        self._changed()
        return stored

    def add_task(self, task: Task) -> Task:
        if task.list_id is not None and self.get_list(task.list_id) is None:
            log.warning(f"Task {task!r} references unknown list '{task.list_id}'")
        self._tasks.append(task)
        log.info(f"Added task {task!r}")
        self._changed()
        return task

    def update_task(self, task: Task, **changes: Any) -> Task:
        stored = self.get_task(task.id)
        if stored is None:
            raise EntityNotFoundError(task)
        self._apply_changes(stored, changes)
        log.info(f"Updated task {stored!r}: {sorted(changes)}")
        self._changed()
        return stored

    def toggle_completed(self, task: Task) -> Task:
        stored = self.get_task(task.id)
        if stored is None:
            raise EntityNotFoundError(task)
        return self.update_task(stored, is_completed=not stored.is_completed)

    @staticmethod
    def _apply_changes(stored: TaskList | Task, changes: dict[str, Any]) -> None:
        """Validates all ``changes`` together, then copies them onto ``stored``.

        Raises:
            ValueError: If a name is not a field of the model.
            ValidationError: If the changed model would be invalid.
        """
        unknown = sorted(set(changes) - set(type(stored).model_fields))
        if unknown:
            raise ValueError(f"Unknown {type(stored).__name__} field(s): {unknown}")
        candidate = type(stored).model_validate({**stored.model_dump(), **changes})
        for field_name in changes:
            setattr(stored, field_name, getattr(candidate, field_name))

    def delete(self, entity: TaskList | Task) -> None:
        """Removes a list (and its tasks) or a single task.

        Raises:
            EntityNotFoundError: If the entity is not in the store.
        """
        if isinstance(entity, TaskList):
            if entity not in self._lists:
                raise EntityNotFoundError(entity)
            self._lists.remove(entity)
            removed = [task for task in self._tasks if task.list_id == entity.id]
            self._tasks = [task for task in self._tasks if task.list_id != entity.id]
            log.info(f"Deleted list {entity!r} with {len(removed)} task(s)")
        elif isinstance(entity, Task):
            if entity not in self._tasks:
                raise EntityNotFoundError(entity)
            self._tasks.remove(entity)
            log.info(f"Deleted task {entity!r}")
        else:
            raise TypeError(f"Cannot delete object of type {type(entity).__name__}")
        self._changed()

    # --- Persistence ---

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": STORE_FORMAT_VERSION,
            "lists": [item.model_dump(mode="json") for item in self._lists],
            "tasks": [item.model_dump(mode="json") for item in self._tasks],
        }

    def save(self) -> bool:
        if self.path is None:
            log.debug("In-memory store, nothing to save")
            return False
        return save_json(self.to_dict(), self.path)

    def load(self) -> None:
        """Replaces the collections with the contents of the data file.

        A missing file leaves the store empty. Entries that fail validation
        are skipped and logged.

        Raises:
            StoreLoadError: If the file exists but is unreadable or malformed.
        """
        if self.path is None or not self.path.is_file():
            if self.path is None:
                log.info("In-memory store, starting empty")
            else:
                log.info(f"No data file at '{self.path}', starting with an empty store")
            self._lists, self._tasks = [], []
            self._notify_only()
            return

        data = load_json(self.path)
        if not isinstance(data, dict):
            raise StoreLoadError(f"Data file '{self.path}' is not a valid store file")

        self._lists = self._parse_entries(TaskList, data.get("lists", []))
        known_ids = {item.id for item in self._lists}
        tasks = self._parse_entries(Task, data.get("tasks", []))
        orphans = [task for task in tasks if task.list_id is not None and task.list_id not in known_ids]
        if orphans:
            log.warning(f"Dropping {len(orphans)} task(s) that reference missing lists")
        self._tasks = [task for task in tasks if task not in orphans]

        log.success(f"Loaded {len(self._lists)} list(s) and {len(self._tasks)} task(s) from '{self.path}'")
        self._notify_only()

    def _notify_only(self) -> None:
        for callback in list(self._subscribers):
            callback(self)

    @staticmethod
    def _parse_entries(model_class: type[TaskList] | type[Task], raw_entries: Any) -> list:
        if not isinstance(raw_entries, list):
            raise StoreLoadError(f"Expected a list of {model_class.__name__} entries, got {type(raw_entries).__name__}")

        parsed = []
        for index, entry in enumerate(raw_entries):
            if not isinstance(entry, dict):
                log.error(f"Skipping {model_class.__name__} entry {index}: not an object")
                continue
            try:
                parsed.append(model_class.model_validate(entry))
            except ValidationError as e:
                entry_id = str(entry.get("id", f"index_{index}"))[:8]
                log.error(f"Validation error for {model_class.__name__} {entry_id}: {e}")
        return parsed
