# src/taskmate/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- loads the saved task list and wires it into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    Raises StorageError / InvalidFormatError when the task file cannot be read;
    the caller must not continue without a baseline list.
    """
    if settings is None:
        settings = get_settings()

    ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_path)
    tasks = store.load()
    logger.info("Loaded %d tasks from %s", len(tasks), settings.tasks_path)

    return AppState(
        settings=settings,
        task_list=TaskList(tasks),
        store=store,
    )
