# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Nothing is required: every variable has a default.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKS_CLI_APP_NAME": "Name shown in the help banner (default: tasks-cli).",
    "TASKS_CLI_LOG_LEVEL": "Console logging level on stderr (default: WARNING).",
    "TASKS_CLI_LOG_DIR": (
        "Directory for tasks-cli.log (default: ~/.local/state/tasks-cli; empty disables it)."
    ),
    # Storage
    "TASKS_CLI_DATA_FILE": "Task list JSON file (default: ~/tasks-cli-storage.json).",
}
