# src/task_cli/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..errors import ArgumentCountError, CommandError, TaskCliError, quote
from ..tasks import task_api
from ..tasks.task_models import TaskStatus

CommandHandler = Callable[[AppState, list[str]], str | None]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Verb registry used by main(): add, list, update, ..."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(self, name: str, handler: CommandHandler, help_text: str) -> None:
        self._handlers[name] = handler
        self._help[name] = help_text

    def __contains__(self, name: str) -> bool:
        return name in self._handlers

    def handle(self, state: AppState, name: str, args: list[str]) -> str | None:
        """
        Run command `name` with `args`.
        Returns the text to print on stdout (None for silent success).
        Any TaskCliError from the handler is re-raised as CommandError tagged with `name`.
        Raises KeyError for an unregistered name.
        """
        handler = self._handlers[name]
        try:
            return handler(state, args)
        except TaskCliError as exc:
            raise CommandError(state.settings.prog_name, name, exc) from exc

    def build_help(self, prog: str) -> str:
        lines = [
            "",
            f"Usage: {prog} [OPTIONS] COMMAND [ARG...]",
            "",
            "A command line task manager",
            "",
            "Commands:",
        ]
        for name, help_text in self._help.items():
            lines.append(f"  {name:<20}{help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _require_one(args: list[str]) -> str:
    if len(args) != 1:
        raise ArgumentCountError("exactly one argument is required")
    return args[0]


def cmd_add(state: AppState, args: list[str]) -> str | None:
    description = _require_one(args)
    tasks = state.task_store.load()
    task = task_api.add_task(tasks, description, now=state.clock())
    state.task_store.save(tasks)
    logger.info("Added task id=%s", task.id)
    return None


def cmd_update(state: AppState, args: list[str]) -> str | None:
    if len(args) != 2:
        raise ArgumentCountError("exactly two arguments are required")
    task_id = task_api.parse_task_id(args[0])

    tasks = state.task_store.load()
    old_desc = task_api.update_description(tasks, task_id, args[1], now=state.clock())
    new_desc = tasks[task_id].description
    state.task_store.save(tasks)
    logger.info("Updated task id=%s", task_id)
    return f"Updated: {quote(old_desc)} -> {quote(new_desc)}"


def cmd_delete(state: AppState, args: list[str]) -> str | None:
    task_id = task_api.parse_task_id(_require_one(args))

    tasks = state.task_store.load()
    task = task_api.delete_task(tasks, task_id)
    state.task_store.save(tasks)
    logger.info("Deleted task id=%s", task_id)
    return f"{quote(task.description)} deleted"


def _mark(state: AppState, args: list[str], status: TaskStatus) -> str | None:
    task_id = task_api.parse_task_id(_require_one(args))

    tasks = state.task_store.load()
    if not task_api.set_status(tasks, task_id, status, now=state.clock()):
        task = tasks[task_id]
        return f"{quote(task.description)} already {status.label}"
    state.task_store.save(tasks)
    logger.info("Task id=%s -> %s", task_id, status.value)
    return None


def cmd_mark_in_progress(state: AppState, args: list[str]) -> str | None:
    return _mark(state, args, TaskStatus.IN_PROGRESS)


def cmd_mark_done(state: AppState, args: list[str]) -> str | None:
    return _mark(state, args, TaskStatus.DONE)


def cmd_list(state: AppState, args: list[str]) -> str | None:
    if len(args) > 1:
        raise ArgumentCountError("accepts zero or one argument")
    status = task_api.parse_status_filter(args[0]) if args else None

    tasks = state.task_store.load()
    return task_api.format_table(task_api.filter_tasks(tasks, status))


registry.register("add", cmd_add, help_text="Create a new task")
registry.register("list", cmd_list, help_text="List existing tasks")
registry.register("update", cmd_update, help_text="Update an existing task")
registry.register("delete", cmd_delete, help_text="Delete a task")
registry.register("mark-done", cmd_mark_done, help_text="Mark a task as done")
registry.register("mark-in-progress", cmd_mark_in_progress, help_text="Mark a task as in progress")
