# src/taskmate/core/commands.py

"""
Command values produced by the parser and consumed by the dispatcher.

All variants are frozen; indexes are 0-based.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import Task
from .errors import TaskmateError


@dataclass(frozen=True, slots=True)
class Bye:
    pass


@dataclass(frozen=True, slots=True)
class ListTasks:
    pass


@dataclass(frozen=True, slots=True)
class Help:
    pass


@dataclass(frozen=True, slots=True)
class AddTask:
    """Append `task`, or insert it at `index` (used when undoing a delete)."""

    task: Task
    index: int | None = None


@dataclass(frozen=True, slots=True)
class Mark:
    index: int


@dataclass(frozen=True, slots=True)
class Unmark:
    index: int


@dataclass(frozen=True, slots=True)
class Delete:
    index: int


@dataclass(frozen=True, slots=True)
class Find:
    query: str


@dataclass(frozen=True, slots=True)
class Undo:
    pass


@dataclass(frozen=True, slots=True)
class Invalid:
    """Input that could not be turned into a command; `error` is None for unknown keywords."""

    source: str
    error: TaskmateError | None = None


Command = Bye | ListTasks | Help | AddTask | Mark | Unmark | Delete | Find | Undo | Invalid

# Commands that change the task list and therefore get saved + recorded for undo.
MutatingCommand = AddTask | Mark | Unmark | Delete
