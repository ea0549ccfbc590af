# mylists/services/__init__.py

"""Filtering, persistence and screen state for MyLists."""

from .store import EntityNotFoundError, StoreError, StoreLoadError, TaskStore

__all__ = [
    "EntityNotFoundError",
    "StoreError",
    "StoreLoadError",
    "TaskStore",
]
