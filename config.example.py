# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKMATE_APP_NAME": "Name the assistant greets you with (default: taskmate).",
    "TASKMATE_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TASKMATE_DATA_DIR": "Local data directory (default: ./data).",
    "TASKMATE_TASKS_PATH": "Task file path (default: <data_dir>/tasks.txt). Overridden by --file.",
    "TASKMATE_LOG_PATH": "Log file path (default: <data_dir>/taskmate.log).",
    # Console
    "TASKMATE_WRAP_WIDTH": "Column width used to wrap replies (default: 72, minimum 20).",
}
