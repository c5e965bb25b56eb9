# src/task_cli/cli/bootstrap.py

"""
Composition root: turns Settings into the AppState handed to every command.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings: Settings | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_file)
    logger.debug("Task store path=%s", store.path)
    return AppState(settings=settings, task_store=store)
