# src/taskmate/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import StrEnum
from typing import ClassVar

from ..core.errors import DateParseError, MissingDescriptionError

ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
DISPLAY_DATE_FORMAT = "%b %d %Y"
STORAGE_SEPARATOR = " | "


class TaskType(StrEnum):
    """Single-letter tag used both on screen and in the storage file."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def parse_date(text: str) -> date:
    """Parse a strict ISO calendar date (yyyy-mm-dd)."""
    raw = text.strip()
    if not ISO_DATE_RE.fullmatch(raw):
        raise DateParseError(f"'{raw}' is not a date. Please use yyyy-mm-dd.")
    try:
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError as e:
        raise DateParseError(f"'{raw}' is not a valid calendar date.") from e


def format_date(value: date) -> str:
    return value.strftime(DISPLAY_DATE_FORMAT)


def _as_date(value: date | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_date(value)


@dataclass
class Task:
    """
    Base task.

    Notes:
    - description is trimmed; an empty description is rejected at construction
    - completed is keyword-only so variants can add positional fields after it
    - equality is structural (same variant, same fields)
    """

    type_tag: ClassVar[TaskType]

    description: str
    completed: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        self.description = (self.description or "").strip()
        if not self.description:
            raise MissingDescriptionError("The description of a task cannot be empty.")

    @property
    def status_icon(self) -> str:
        return "X" if self.completed else " "

    def mark_done(self) -> None:
        self.completed = True

    def mark_not_done(self) -> None:
        self.completed = False

    def copy(self) -> Task:
        return replace(self)

    def storage_extras(self) -> list[str]:
        return []

    def to_storage(self) -> str:
        parts = [str(self.type_tag), "1" if self.completed else "0", self.description]
        parts.extend(self.storage_extras())
        return STORAGE_SEPARATOR.join(parts)

    def __str__(self) -> str:
        return f"[{self.type_tag}][{self.status_icon}] {self.description}"


@dataclass
class ToDo(Task):
    type_tag: ClassVar[TaskType] = TaskType.TODO


@dataclass
class Deadline(Task):
    type_tag: ClassVar[TaskType] = TaskType.DEADLINE

    by: date

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        self.by = _as_date(self.by)

    def storage_extras(self) -> list[str]:
        return [self.by.isoformat()]

    def __str__(self) -> str:
        return f"{Task.__str__(self)} (by: {format_date(self.by)})"


@dataclass
class Event(Task):
    type_tag: ClassVar[TaskType] = TaskType.EVENT

    start: date
    end: date

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        self.start = _as_date(self.start)
        self.end = _as_date(self.end)

    def storage_extras(self) -> list[str]:
        return [self.start.isoformat(), self.end.isoformat()]

    def __str__(self) -> str:
        return f"{Task.__str__(self)} (from: {format_date(self.start)} to: {format_date(self.end)})"
