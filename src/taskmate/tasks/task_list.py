# src/taskmate/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import InvalidIndexError
from .task_models import Task


class TaskList:
    """
    Ordered, in-memory task collection.

    Indexes are 0-based here; the 1-based numbers users type are converted
    by the parser. Out-of-range indexes raise InvalidIndexError and leave the
    list untouched.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the current order (the list itself is not shared)."""
        return list(self._tasks)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            if not self._tasks:
                raise InvalidIndexError("There are no tasks in your list yet.")
            raise InvalidIndexError(
                f"Task {index + 1} does not exist. Pick a number from 1 to {len(self._tasks)}."
            )

    def add(self, task: Task) -> int:
        self._tasks.append(task)
        return len(self._tasks)

    def insert(self, index: int, task: Task) -> int:
        if not 0 <= index <= len(self._tasks):
            raise InvalidIndexError(f"Cannot insert a task at position {index + 1}.")
        self._tasks.insert(index, task)
        return len(self._tasks)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def mark_done(self, index: int) -> Task:
        task = self.get(index)
        task.mark_done()
        return task

    def mark_not_done(self, index: int) -> Task:
        task = self.get(index)
        task.mark_not_done()
        return task

    def delete(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks.pop(index)

    def find(self, query: str) -> list[Task]:
        needle = query.lower()
        if not needle:
            return []
        return [t for t in self._tasks if needle in t.description.lower()]
