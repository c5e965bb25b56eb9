# src/task_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

MAX_TASK_ID = 2**32 - 1


def storable_text(text: str) -> str:
    """
    Return `text` as valid UTF-8 content.

    Undecodable argv bytes arrive as lone surrogates (surrogateescape); each one becomes U+FFFD,
    like every other unencodable code point.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "surrogatepass")
    return raw.decode("utf-8", "replace")


class TaskStatus(StrEnum):
    """Task lifecycle status. Values are the exact strings stored on disk and typed on the CLI."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @property
    def label(self) -> str:
        """Human wording used in messages ("already in progress")."""
        return self.value.replace("-", " ")


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        """
        Build a Task from its JSON object form.

        Raises ValueError/TypeError/KeyError on any missing or malformed field;
        the store turns those into TaskLoadError.
        """
        task_id = raw["id"]
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise TypeError(f"id must be an integer, got {task_id!r}")
        if not 0 <= task_id <= MAX_TASK_ID:
            raise ValueError(f"id {task_id} is out of range")

        description = raw["description"]
        if not isinstance(description, str):
            raise TypeError("description must be a string")

        status = raw["status"]
        if not isinstance(status, str):
            raise TypeError("status must be a string")

        return cls(
            id=task_id,
            description=description,
            status=TaskStatus(status),
            created_at=_parse_ts(raw["createdAt"]),
            updated_at=_parse_ts(raw["updatedAt"]),
        )


def _parse_ts(raw: Any) -> datetime:
    if not isinstance(raw, str):
        raise TypeError("timestamp must be a string")
    return datetime.fromisoformat(raw)


class TaskMap(dict[int, Task]):
    """
    id -> Task for one invocation.

    last_id is the highest id ever handed out, kept separately so deleting the newest
    task never frees its id.
    """

    def __init__(self, *args: Any, last_id: int = 0, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.last_id = last_id

    @property
    def high_water(self) -> int:
        return max(self.last_id, max(self, default=0))
