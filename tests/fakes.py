# tests/fakes.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from task_cli.errors import TaskSaveError
from task_cli.tasks.task_store import TaskMap, TaskStore

START = datetime(2026, 10, 19, 9, 30, 0, 123456, tzinfo=timezone(timedelta(hours=2)))


class FakeClock:
    """
    Deterministic clock: every call returns a time one second after the previous one.
    """

    def __init__(self, start: datetime = START) -> None:
        self.current = start - timedelta(seconds=1)
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        self.current += timedelta(seconds=1)
        return self.current


class FailingSaveStore(TaskStore):
    """TaskStore whose save() always fails, to check nothing is reported as success."""

    def save(self, tasks: TaskMap) -> None:
        raise TaskSaveError(f"cannot write {self.path}: disk full")
