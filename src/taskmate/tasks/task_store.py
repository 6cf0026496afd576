# src/taskmate/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from datetime import date
from pathlib import Path

from ..core.errors import DateParseError, InvalidFormatError, StorageError
from .task_models import Deadline, Event, Task, TaskType, ToDo, parse_date

logger = logging.getLogger(__name__)

TODO_FORMAT = "T | [0/1] | [description]"
DEADLINE_FORMAT = "D | [0/1] | [description] | yyyy-mm-dd"
EVENT_FORMAT = "E | [0/1] | [description] | yyyy-mm-dd | yyyy-mm-dd"


# ---- codec ----


def encode_task(task: Task) -> str:
    return task.to_storage()


def encode_tasks(tasks: Iterable[Task]) -> str:
    return "".join(f"{encode_task(t)}\n" for t in tasks)


def _split_tail(rest: str, count: int, expected: str) -> list[str]:
    """Split `description | f1 | ... | fN` from the right so descriptions may contain pipes."""
    parts = rest.rsplit("|", count)
    if len(parts) != count + 1:
        raise InvalidFormatError(f"Format should be {expected}")
    return [p.strip() for p in parts]


def _parse_stored_date(raw: str, expected: str) -> date:
    try:
        return parse_date(raw)
    except DateParseError as e:
        raise InvalidFormatError(f"Invalid date '{raw}'. Format should be {expected}") from e


def decode_line(line: str) -> Task:
    """
    Decode one storage line.

    Validation order: task type tag, done flag, then variant fields (dates last).
    """
    fields = line.split("|", 2)
    tag = fields[0].strip()
    try:
        task_type = TaskType(tag)
    except ValueError:
        raise InvalidFormatError(f"Invalid task type '{tag}' (expected T, D or E).") from None

    if len(fields) < 3:
        raise InvalidFormatError("Format is [T/D/E] | [0/1] | [description]")

    done_raw = fields[1].strip()
    if done_raw not in ("0", "1"):
        raise InvalidFormatError(f"Invalid done flag '{done_raw}' (expected 0 or 1).")
    completed = done_raw == "1"
    rest = fields[2]

    match task_type:
        case TaskType.TODO:
            description = rest.strip()
            if not description:
                raise InvalidFormatError(f"Format should be {TODO_FORMAT}")
            return ToDo(description, completed=completed)

        case TaskType.DEADLINE:
            description, by_raw = _split_tail(rest, 1, DEADLINE_FORMAT)
            if not description:
                raise InvalidFormatError(f"Format should be {DEADLINE_FORMAT}")
            by = _parse_stored_date(by_raw, DEADLINE_FORMAT)
            return Deadline(description, by, completed=completed)

        case TaskType.EVENT:
            description, start_raw, end_raw = _split_tail(rest, 2, EVENT_FORMAT)
            if not description:
                raise InvalidFormatError(f"Format should be {EVENT_FORMAT}")
            start = _parse_stored_date(start_raw, EVENT_FORMAT)
            end = _parse_stored_date(end_raw, EVENT_FORMAT)
            return Event(description, start, end, completed=completed)

    raise InvalidFormatError(f"Unsupported task type '{tag}'.")


def decode_lines(lines: Iterable[str]) -> list[Task]:
    """
    Decode a whole file.

    A single malformed line aborts the load; blank lines are ignored.
    """
    tasks: list[Task] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            tasks.append(decode_line(line))
        except InvalidFormatError as e:
            raise InvalidFormatError(f"Line {lineno} of the task file is corrupted: {e.message}") from e
    return tasks


# ---- file-backed store ----


class TaskStore:
    """
    Plain-text task store.

    The file always holds a complete snapshot: every save rewrites all lines
    into a temp file which then replaces the original.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def ensure_file(self) -> None:
        """Create the parent directory and an empty file when missing."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch(exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create task file {self._path}: {e}") from e

    def load(self) -> list[Task]:
        self.ensure_file()
        try:
            # Bytes, so no universal-newline translation: records end with "\n" only.
            text = self._path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Error reading the task file {self._path}: {e}") from e

        tasks = decode_lines(text.split("\n"))
        logger.info("TaskStore loaded path=%s total=%d", self._path, len(tasks))
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        payload = encode_tasks(tasks)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8", newline="\n")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            logger.exception("Failed to save tasks to %s", self._path)
            raise StorageError(f"Error writing to the task file {self._path}: {e}") from e
        logger.debug("TaskStore saved path=%s bytes=%d", self._path, len(payload))
