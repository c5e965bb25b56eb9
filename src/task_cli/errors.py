# src/task_cli/errors.py

"""
Exception hierarchy.

Handlers and the store raise specific TaskCliError subclasses with a human-readable
message. The command registry wraps them once into CommandError, which carries the
command name; main() is the only place that formats and prints it.
"""

from __future__ import annotations

import json

from .tasks.task_models import storable_text


class TaskCliError(Exception):
    """Base class for every handled (user-facing) error."""


class ArgumentCountError(TaskCliError):
    pass


class InvalidTaskIdError(TaskCliError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"invalid task ID {quote(raw)}")


class TaskNotFoundError(TaskCliError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"task with ID {task_id} does not exist")


class InvalidFilterError(TaskCliError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"invalid filter {quote(raw)}")


class TaskIdExhaustedError(TaskCliError):
    pass


class StoreError(TaskCliError):
    """Persistence failure; the original exception is kept as __cause__."""


class TaskLoadError(StoreError):
    pass


class TaskSaveError(StoreError):
    pass


class CommandError(TaskCliError):
    """A handler failure tagged with the command that produced it."""

    def __init__(self, prog: str, command: str, cause: TaskCliError) -> None:
        self.prog = prog
        self.command = command
        self.cause = cause
        super().__init__(f'"{prog} {command}": {cause}')


def quote(text: str) -> str:
    """Render a user-supplied value as a double-quoted JSON string literal for messages."""
    return json.dumps(storable_text(text), ensure_ascii=False)
