# src/task_cli/tasks/task_api.py

"""
Pure operations over a loaded task collection.

Nothing here touches the filesystem: callers load a TaskMap from TaskStore, apply one
operation, and save the result. Timestamps come from the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from ..errors import InvalidFilterError, InvalidTaskIdError, TaskIdExhaustedError, TaskNotFoundError
from .task_models import MAX_TASK_ID, Task, TaskMap, TaskStatus, storable_text

logger = logging.getLogger(__name__)

ID_WIDTH = 10
STATUS_WIDTH = 15
DESCRIPTION_WIDTH = 10


def parse_task_id(raw: str) -> int:
    """Parse an unsigned 32-bit decimal id. Signs, whitespace and underscores are rejected."""
    if not raw or not raw.isascii() or not raw.isdigit():
        raise InvalidTaskIdError(raw)
    value = int(raw)
    if value > MAX_TASK_ID:
        raise InvalidTaskIdError(raw)
    return value


def parse_status_filter(raw: str) -> TaskStatus:
    try:
        return TaskStatus(raw)
    except ValueError:
        raise InvalidFilterError(raw) from None


def next_task_id(tasks: TaskMap) -> int:
    """
    One past the highest id ever assigned (present ids and tasks.last_id), 1 for a fresh store.
    Deleted ids, including the newest one, are never reused.
    """
    max_id = tasks.high_water
    if max_id >= MAX_TASK_ID:
        raise TaskIdExhaustedError(f"no task ID left above {max_id}")
    return max_id + 1


def get_task(tasks: TaskMap, task_id: int) -> Task:
    task = tasks.get(task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


def add_task(tasks: TaskMap, description: str, *, now: datetime) -> Task:
    task = Task(
        id=next_task_id(tasks),
        description=storable_text(description),
        status=TaskStatus.TODO,
        created_at=now,
        updated_at=now,
    )
    tasks[task.id] = task
    tasks.last_id = task.id
    logger.debug("Task added id=%s", task.id)
    return task


def update_description(tasks: TaskMap, task_id: int, description: str, *, now: datetime) -> str:
    """Rename a task in place; returns the previous description."""
    task = get_task(tasks, task_id)
    old = task.description
    task.description = storable_text(description)
    task.updated_at = now
    return old


def delete_task(tasks: TaskMap, task_id: int) -> Task:
    task = get_task(tasks, task_id)
    del tasks[task_id]
    return task


def set_status(tasks: TaskMap, task_id: int, status: TaskStatus, *, now: datetime) -> bool:
    """
    Move a task to `status`.

    Returns False (and leaves the task untouched, updated_at included) when the task
    already has that status, True when it was changed.
    """
    task = get_task(tasks, task_id)
    if task.status == status:
        return False
    task.status = status
    task.updated_at = now
    return True


def filter_tasks(tasks: TaskMap, status: TaskStatus | None = None) -> list[Task]:
    """Tasks sorted by id, optionally restricted to one status."""
    out = [tasks[task_id] for task_id in sorted(tasks)]
    if status is not None:
        out = [t for t in out if t.status == status]
    return out


def format_table(tasks: Iterable[Task]) -> str:
    lines = [_row("ID", "STATUS", "DESCRIPTION")]
    for task in tasks:
        lines.append(_row(str(task.id), task.status.value, task.description))
    return "\n".join(lines)


def _row(task_id: str, status: str, description: str) -> str:
    return f"{task_id:<{ID_WIDTH}}{status:<{STATUS_WIDTH}}{description:<{DESCRIPTION_WIDTH}}"
