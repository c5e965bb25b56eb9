# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    "TASK_CLI_TASKS_FILE": "Path of the JSON task file (default: tasks.json in the working directory).",
    "TASK_CLI_LOG_LEVEL": "Console log level on stderr (default: WARNING).",
    "TASK_CLI_LOG_FILE": "Optional path of a DEBUG log file (default: no file logging).",
    "TASK_CLI_PROG_NAME": "Program name shown in usage and error messages (default: task-cli).",
}
