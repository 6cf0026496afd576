# src/taskmate/core/dispatcher.py

"""
Command execution.

The dispatcher applies one Command to the task list, saves the full list after
every mutating command, and records the inverse command so `undo` can restore
the previous state. The inverse is computed at execution time, from the state
the command actually changed.
"""

from __future__ import annotations

import logging

from .commands import (
    AddTask,
    Bye,
    Command,
    Delete,
    Find,
    Help,
    Invalid,
    ListTasks,
    Mark,
    MutatingCommand,
    Undo,
    Unmark,
)
from .errors import StorageError, TaskmateError
from .ports import DisplaySink
from .state import AppState

logger = logging.getLogger(__name__)


class Dispatcher:
    def __init__(self, state: AppState, display: DisplaySink, *, help_text: str = "") -> None:
        self.state = state
        self.display = display
        self.help_text = help_text

    def execute(self, command: Command) -> bool:
        """Run a command. Returns True when the session should end."""
        logger.debug("Executing %r", command)

        match command:
            case Bye():
                self.display.show_goodbye()
                return True
            case ListTasks():
                self.display.show_tasks(self.state.task_list.tasks)
            case Help():
                self.display.show_message(self.help_text)
            case Find(query=query):
                self.display.show_matches(self.state.task_list.find(query))
            case Undo():
                self._undo()
            case Invalid():
                self._show_invalid(command)
            case AddTask() | Mark() | Unmark() | Delete():
                try:
                    inverse = self._apply(command)
                except TaskmateError as e:
                    self.display.show_error(e.message)
                    return False
                self.state.undo_stack.append(inverse)
                self._persist()
        return False

    # ---- mutation ----

    def _apply(self, command: MutatingCommand) -> MutatingCommand:
        """Apply a mutating command, confirm it to the user, and return its inverse."""
        task_list = self.state.task_list

        match command:
            case AddTask(task=task, index=None):
                added = task.copy()
                count = task_list.add(added)
                self.display.show_task_added(added, count)
                return Delete(count - 1)

            case AddTask(task=task, index=index):
                added = task.copy()
                count = task_list.insert(index, added)
                self.display.show_task_added(added, count)
                return Delete(index)

            case Mark(index=index):
                was_done = task_list.get(index).completed
                task = task_list.mark_done(index)
                self.display.show_task_updated(task, True)
                return Mark(index) if was_done else Unmark(index)

            case Unmark(index=index):
                was_done = task_list.get(index).completed
                task = task_list.mark_not_done(index)
                self.display.show_task_updated(task, False)
                return Mark(index) if was_done else Unmark(index)

            case Delete(index=index):
                removed = task_list.delete(index)
                self.display.show_task_removed(removed, len(task_list))
                return AddTask(removed.copy(), index)

        raise TypeError(f"Not a mutating command: {command!r}")

    def _undo(self) -> None:
        stack = self.state.undo_stack
        if not stack:
            self.display.show_message("Nothing to undo.")
            return

        inverse = stack.pop()
        logger.info("Undo: applying %r (remaining=%d)", inverse, len(stack))
        self.display.show_message("Undoing your last change.")
        try:
            self._apply(inverse)
        except TaskmateError as e:
            # Only possible if the list changed outside the dispatcher.
            logger.warning("Undo of %r failed: %s", inverse, e)
            self.display.show_error(e.message)
            return
        self._persist()

    def _persist(self) -> None:
        try:
            self.state.store.save(self.state.task_list)
        except StorageError as e:
            self.display.show_error(
                f"{e.message}\nYour change is kept for this session but may not be saved."
            )

    # ---- diagnostics ----

    def _show_invalid(self, command: Invalid) -> None:
        if command.error is not None:
            self.display.show_error(command.error.message)
            return
        keyword = command.source.split(maxsplit=1)[0] if command.source.strip() else ""
        if keyword:
            self.display.show_error(
                f"Sorry, I don't know what '{keyword}' means. Type 'help' to see what I can do."
            )
        else:
            self.display.show_error("Please type a command. Type 'help' to see what I can do.")
