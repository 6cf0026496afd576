# src/taskmate/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState from the saved task file, then runs the
console REPL until `bye`.
"""

from __future__ import annotations

import argparse
import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry
from ..config import get_settings
from ..connectors.console_connector import ConsoleDisplay, run_console_loop
from ..core.dispatcher import Dispatcher
from ..core.errors import TaskmateError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taskmate", description="Personal task tracker.")
    parser.add_argument(
        "--file",
        dest="tasks_path",
        default=None,
        help="Task file to use (default: $TASKMATE_TASKS_PATH or data/tasks.txt).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    settings = get_settings()
    if args.tasks_path:
        settings = settings.with_tasks_path(args.tasks_path)

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_file=settings.log_path, console_level=console_level)

    logger.info("Starting %s (tasks file %s)...", settings.app_name, settings.tasks_path)

    try:
        state = create_initial_state(settings=settings)
    except TaskmateError as e:
        # A session never starts without a loaded baseline list.
        logger.error("Cannot load tasks: %s", e)
        print(f"Cannot start: {e.message}", file=sys.stderr)
        return 1

    display = ConsoleDisplay(app_name=settings.app_name, width=settings.wrap_width)
    dispatcher = Dispatcher(state, display, help_text=registry.build_help())

    run_console_loop(dispatcher)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
