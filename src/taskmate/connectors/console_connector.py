# src/taskmate/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
import textwrap
from collections.abc import Callable, Sequence
from typing import TextIO

from ..cli.commands import interpret
from ..core.dispatcher import Dispatcher
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

INDENT = "    "


class ConsoleDisplay:
    """
    DisplaySink that prints to a text stream.

    Every reply is framed between two horizontal rules and word-wrapped to
    `width` columns (lines are wrapped individually so list rows stay intact).
    """

    def __init__(self, *, app_name: str = "taskmate", width: int = 72, out: TextIO | None = None) -> None:
        self.app_name = app_name
        self.width = width
        self.out = out if out is not None else sys.stdout

    # ---- framing ----

    def _wrap(self, text: str) -> str:
        wrapped: list[str] = []
        for line in text.splitlines() or [""]:
            stripped = line.lstrip(" ")
            indent = line[: len(line) - len(stripped)]
            if not stripped:
                wrapped.append("")
                continue
            wrapped.extend(
                textwrap.wrap(
                    stripped,
                    width=self.width - len(INDENT),
                    initial_indent=indent,
                    subsequent_indent=indent + "  ",
                    break_long_words=True,
                )
            )
        return "\n".join(INDENT + w if w else "" for w in wrapped)

    def _print(self, text: str) -> None:
        rule = INDENT + "_" * (self.width - len(INDENT))
        print(rule, file=self.out)
        print(self._wrap(text), file=self.out)
        print(rule + "\n", file=self.out, flush=True)

    @staticmethod
    def _numbered(tasks: Sequence[Task]) -> list[str]:
        return [f"{i}. {task}" for i, task in enumerate(tasks, start=1)]

    # ---- DisplaySink ----

    def show_welcome(self) -> None:
        self._print(f"Hello! I'm {self.app_name}.\nWhat can I do for you? (type 'help' for commands)")

    def show_goodbye(self) -> None:
        self._print("Bye. Hope to see you again soon!")

    def show_tasks(self, tasks: Sequence[Task]) -> None:
        if not tasks:
            self._print("No tasks in your list.")
            return
        self._print("\n".join(["Here are the tasks in your list:", *self._numbered(tasks)]))

    def show_task_added(self, task: Task, count: int) -> None:
        self._print(f"Got it. I've added this task:\n  {task}\nNow you have {count} tasks in the list.")

    def show_task_removed(self, task: Task, count: int) -> None:
        self._print(f"Noted. I've removed this task:\n  {task}\nNow you have {count} tasks in the list.")

    def show_task_updated(self, task: Task, done: bool) -> None:
        if done:
            self._print(f"Nice! I've marked this task as done:\n  {task}")
        else:
            self._print(f"OK, I've marked this task as not done yet:\n  {task}")

    def show_matches(self, tasks: Sequence[Task]) -> None:
        if not tasks:
            self._print("No matching tasks found.")
            return
        self._print("\n".join(["Here are the matching tasks in your list:", *self._numbered(tasks)]))

    def show_message(self, text: str) -> None:
        self._print(text)

    def show_error(self, message: str) -> None:
        self._print(f"OOPS! {message}")


def run_console_loop(
    dispatcher: Dispatcher,
    *,
    read_line: Callable[[str], str] | None = None,
    prompt: str = "",
) -> None:
    """Read lines until `bye` (or EOF / Ctrl+C) and feed each one to the dispatcher."""
    logger.info("Console connector started (tasks=%d).", len(dispatcher.state.task_list))
    read = read_line or input
    display = dispatcher.display
    display.show_welcome()

    while True:
        try:
            line = read(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line.strip():
            continue

        try:
            should_exit = dispatcher.execute(interpret(line))
        except Exception:
            logger.exception("Command handler crashed.")
            display.show_error("Internal error while handling that command.")
            continue

        if should_exit:
            break

    logger.info("Console connector finished.")
