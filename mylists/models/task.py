# mylists/models/task.py

# ─── Title ────────────────────────────────────────────────────────────────────
#                    Task and TaskList Models
# ──────────────────────────────────────────────────────────────────────────────

# SECTION: MODULE DOCSTRING
"""Pydantic models for task lists and the tasks that belong to them.

A Task points at its owning TaskList through ``list_id``; the store keeps
both collections and resolves the relationship.
"""

# SECTION: IMPORTS
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any

import emoji_data_python
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticCustomError

from mylists.helpers._date import format_reminder, parse_reminder
from mylists.helpers._logger import log


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# SECTION: ENUMS


# ENUM: ListColor
class ListColor(str, Enum):
    """Palette offered by the list editor."""

    RED = "#eb6f92"
    ORANGE = "#f6c177"
    YELLOW = "#f9e2af"
    GREEN = "#a6e3a1"
    BLUE = "#89b4fa"
    PURPLE = "#c4a7e7"
    BROWN = "#b4876d"

    @property
    def label(self) -> str:
        return self.name.capitalize()


# SECTION: BASE MODEL


# KLASS: MyListsModel
class MyListsModel(BaseModel):
    """Shared configuration for all persisted models."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )

    id: str = Field(default_factory=_new_id)
    created_at: datetime = Field(default_factory=_utcnow, alias="createdAt")

    @model_validator(mode="before")
    @classmethod
    def ensure_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("id"):
            data = {**data, "id": _new_id()}
            log.debug(f"Generated ID {data['id'][:8]} for new {cls.__name__}")
        return data

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MyListsModel):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id


# SECTION: TASK LIST


# KLASS: TaskList
class TaskList(MyListsModel):
    """A named grouping of tasks."""

    name: str
    color: ListColor = ListColor.BLUE
    icon: str = "•"

    @field_validator("name", mode="before")
    @classmethod
    def parse_name(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise PydanticCustomError("value_error", "List name must be a non-empty string", {"value": value})
        return emoji_data_python.replace_colons(value).strip()

    @field_validator("icon", mode="before")
    @classmethod
    def parse_icon(cls, value: Any) -> str:
        if isinstance(value, str) and value.strip():
            return emoji_data_python.replace_colons(value).strip()
        return "•"

    def __repr__(self) -> str:
        return f"TaskList(id='{self.id[:8]}', name='{self.name}')"

    def __str__(self) -> str:
        return self.name


# SECTION: TASK


# KLASS: Task
class Task(MyListsModel):
    """A unit of work with a title, completion flag and optional reminder."""

    title: str = ""
    notes: str = ""
    is_completed: bool = Field(False, alias="isCompleted")
    reminder_date: datetime | None = Field(None, alias="reminderDate")
    list_id: str | None = Field(None, alias="listId")

    @field_validator("title", "notes", mode="before")
    @classmethod
    def parse_text_emoji(cls, value: Any, info: ValidationInfo) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return emoji_data_python.replace_colons(value).strip()
        log.warning(f"Field '{info.field_name}': Expected string, got {type(value).__name__}")
        return ""

    @field_validator("reminder_date", mode="before")
    @classmethod
    def parse_reminder_date(cls, value: Any) -> datetime | None:
        try:
            return parse_reminder(value)
        except (ValueError, TypeError, OverflowError) as e:
            raise PydanticCustomError("value_error", "Invalid reminder date: {error}", {"error": str(e)}) from e

    @property
    def has_reminder(self) -> bool:
        return self.reminder_date is not None

    @property
    def reminder_display(self) -> str:
        return format_reminder(self.reminder_date)

    def __repr__(self) -> str:
        status = "[x]" if self.is_completed else "[ ]"
        text_preview = self.title[:25].replace("\n", " ")
        if len(self.title) > 25:
            text_preview += "..."
        return f"Task(id='{self.id[:8]}', {status} title='{text_preview}')"

    def __str__(self) -> str:
        return self.title
