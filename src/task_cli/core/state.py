# src/task_cli/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from ..config import Settings
from ..tasks.task_store import TaskStore


def local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class AppState:
    # Everything one command invocation needs; built by cli.bootstrap.
    settings: Settings
    task_store: TaskStore
    clock: Callable[[], datetime] = field(default=local_now)
