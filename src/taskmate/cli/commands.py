# src/taskmate/cli/commands.py

"""
Command parsing.

A raw input line is split into a keyword and the rest of the line; the keyword
selects a registered parse function which validates the rest and builds a
Command. Parse functions raise the specific TaskmateError for what is wrong;
`interpret()` turns those into Invalid commands so the input loop never sees
an exception.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.commands import (
    AddTask,
    Bye,
    Command,
    Delete,
    Find,
    Help,
    Invalid,
    ListTasks,
    Mark,
    Undo,
    Unmark,
)
from ..core.errors import (
    InvalidFormatError,
    InvalidIndexError,
    MissingDateTimeError,
    MissingDescriptionError,
    TaskmateError,
)
from ..tasks.task_models import Deadline, Event, ToDo, parse_date

CommandParser = Callable[[str], Command]

logger = logging.getLogger(__name__)

BY_MARKER = "/by"
FROM_MARKER = "/from"
TO_MARKER = "/to"
EVENT_SHAPE_RE = re.compile(r"/from.*/to")
NON_DIGITS_RE = re.compile(r"\D+")


def tokenize(line: str) -> tuple[str, str]:
    """Split on the first whitespace run: ("keyword", "rest of line")."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    keyword = parts[0]
    rest = parts[1] if len(parts) > 1 else ""
    return keyword, rest


class CommandRegistry:
    """Keyword -> parse function table; also the source of the help text."""

    def __init__(self) -> None:
        self._parsers: dict[str, CommandParser] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(self, name: str, parser: CommandParser, usage: str, help_text: str) -> None:
        key = name.lower()
        self._parsers[key] = parser
        self._help[key] = (usage, help_text)

    @property
    def names(self) -> list[str]:
        return list(self._parsers)

    def parse(self, line: str) -> Command:
        """
        Parse a line into a Command.

        Unknown keywords give Invalid; malformed arguments raise TaskmateError.
        """
        keyword, rest = tokenize(line)
        parser = self._parsers.get(keyword.lower()) if keyword else None
        if parser is None:
            return Invalid(line)
        return parser(rest)

    def interpret(self, line: str) -> Command:
        """Like parse(), but parse errors come back as Invalid(line, error)."""
        try:
            return self.parse(line)
        except TaskmateError as e:
            logger.debug("Parse failed kind=%s line=%r: %s", e.kind, line, e)
            return Invalid(line, e)

    def build_help(self) -> str:
        lines = ["Here are the commands I understand:"]
        for usage, help_text in self._help.values():
            lines.append(f"  {usage} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_command(line: str) -> Command:
    return registry.parse(line)


def interpret(line: str) -> Command:
    return registry.interpret(line)


# ---- argument helpers ----


def _content(rest: str, keyword: str) -> str:
    content = rest.strip()
    if not content:
        raise MissingDescriptionError(f"Please include a description after '{keyword}'.")
    return content


def _index(rest: str, keyword: str) -> int:
    """1-based task number typed by the user -> 0-based index. Stray non-digits are ignored."""
    digits = NON_DIGITS_RE.sub("", rest)
    if not digits:
        raise InvalidIndexError(f"No task number found. Please give one, e.g. '{keyword} 2'.")
    index = int(digits) - 1
    if index < 0:
        raise InvalidIndexError("Please input a valid count: task numbers start at 1.")
    return index


# ---- per-command parsers ----


def parse_bye(rest: str) -> Command:
    return Bye()


def parse_list(rest: str) -> Command:
    return ListTasks()


def parse_help(rest: str) -> Command:
    return Help()


def parse_undo(rest: str) -> Command:
    return Undo()


def parse_todo(rest: str) -> Command:
    return AddTask(ToDo(_content(rest, "todo")))


def parse_find(rest: str) -> Command:
    return Find(_content(rest, "find"))


def parse_deadline(rest: str) -> Command:
    content = _content(rest, "deadline")
    if BY_MARKER not in content:
        raise InvalidFormatError("Please use: deadline <description> /by <yyyy-mm-dd>")

    description, by_text = content.split(BY_MARKER, 1)
    if not description.strip():
        raise MissingDescriptionError("Missing description after 'deadline'.")
    if not by_text.strip():
        raise MissingDateTimeError("Missing date after /by.")

    return AddTask(Deadline(description.strip(), parse_date(by_text)))


def parse_event(rest: str) -> Command:
    content = _content(rest, "event")
    if not EVENT_SHAPE_RE.search(content):
        raise InvalidFormatError("Please use: event <description> /from <yyyy-mm-dd> /to <yyyy-mm-dd>")

    description, span = content.split(FROM_MARKER, 1)
    if not description.strip():
        raise MissingDescriptionError("Missing description after 'event'.")

    start_text, sep, end_text = span.partition(TO_MARKER)
    if not sep or not start_text.strip() or not end_text.strip():
        raise MissingDateTimeError("Missing date after /from or /to.")

    start = parse_date(start_text)
    end = parse_date(end_text)
    return AddTask(Event(description.strip(), start, end))


def parse_mark(rest: str) -> Command:
    return Mark(_index(rest, "mark"))


def parse_unmark(rest: str) -> Command:
    return Unmark(_index(rest, "unmark"))


def parse_delete(rest: str) -> Command:
    return Delete(_index(rest, "delete"))


registry.register("list", parse_list, "list", "Show all tasks.")
registry.register("todo", parse_todo, "todo <description>", "Add a to-do.")
registry.register(
    "deadline", parse_deadline, "deadline <description> /by <yyyy-mm-dd>", "Add a task with a due date."
)
registry.register(
    "event",
    parse_event,
    "event <description> /from <yyyy-mm-dd> /to <yyyy-mm-dd>",
    "Add an event spanning dates.",
)
registry.register("mark", parse_mark, "mark <n>", "Mark task n as done.")
registry.register("unmark", parse_unmark, "unmark <n>", "Mark task n as not done.")
registry.register("delete", parse_delete, "delete <n>", "Remove task n.")
registry.register("find", parse_find, "find <keyword>", "Show tasks whose description contains the keyword.")
registry.register("undo", parse_undo, "undo", "Revert the last change.")
registry.register("help", parse_help, "help", "Show this list.")
registry.register("bye", parse_bye, "bye", "Save and quit.")
