# src/taskmate/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from .commands import MutatingCommand
from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_list: TaskList
    store: TaskRepo

    # Inverse commands, most recent last. Lives for the session only.
    undo_stack: list[MutatingCommand] = field(default_factory=list)
