# src/taskmate/core/ports.py

"""
Ports (interfaces) used by the core.

The dispatcher depends on these Protocols instead of concrete implementations,
so the console connector and the file store stay swappable and tests can use
recording fakes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from ..tasks.task_models import Task


class DisplaySink(Protocol):
    """Where user-facing output goes. Receives text and tasks, never exceptions."""

    def show_welcome(self) -> None: ...
    def show_goodbye(self) -> None: ...
    def show_tasks(self, tasks: Sequence[Task]) -> None: ...
    def show_task_added(self, task: Task, count: int) -> None: ...
    def show_task_removed(self, task: Task, count: int) -> None: ...
    def show_task_updated(self, task: Task, done: bool) -> None: ...
    def show_matches(self, tasks: Sequence[Task]) -> None: ...
    def show_message(self, text: str) -> None: ...
    def show_error(self, message: str) -> None: ...


class TaskRepo(Protocol):
    """Durable storage for the whole task list (full snapshot per save)."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
