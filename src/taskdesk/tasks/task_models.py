# src/taskdesk/tasks/task_models.py

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values are the user-facing labels; they are also what gets persisted
    in the snapshot, so keep them stable.
    """

    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"

    @classmethod
    def normalize(cls, raw: Any) -> TaskStatus:
        """Return the matching status, or TODO for anything unknown."""
        if isinstance(raw, cls):
            return raw
        if not raw:
            return cls.TODO
        try:
            return cls(raw)
        except Exception:
            return cls.TODO

    @classmethod
    def from_completed(cls, completed: Any) -> TaskStatus:
        return cls.DONE if completed is True else cls.TODO


# Short names accepted by the console (/add, /status, /filter).
STATUS_ALIASES: dict[str, TaskStatus] = {
    "t": TaskStatus.TODO,
    "todo": TaskStatus.TODO,
    "to do": TaskStatus.TODO,
    "ip": TaskStatus.IN_PROGRESS,
    "in-progress": TaskStatus.IN_PROGRESS,
    "in progress": TaskStatus.IN_PROGRESS,
    "d": TaskStatus.DONE,
    "done": TaskStatus.DONE,
}


def parse_status(raw: str) -> TaskStatus | None:
    """Resolve console input ("ip", "Done", ...) to a status; None if unknown."""
    return STATUS_ALIASES.get((raw or "").strip().lower())


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    completed: bool = False

    def normalized(self) -> Task:
        """
        Copy with status forced into the enum and completed re-derived.

        Invariant: completed == (status == DONE).
        """
        status = TaskStatus.normalize(self.status)
        return Task(
            id=int(self.id),
            title=self.title,
            description=self.description or "",
            status=status,
            completed=status is TaskStatus.DONE,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": str(self.status),
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        return cls(
            id=int(data["id"]),
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            status=TaskStatus.normalize(data.get("status")),
        ).normalized()


def task_from_remote(item: dict[str, Any]) -> Task:
    """
    Seed transform for one remote todo item ({id, userId, title, completed}).

    The remote API has no description; status follows the completed flag.
    """
    status = TaskStatus.from_completed(item.get("completed"))
    return Task(
        id=int(item["id"]),
        title=str(item.get("title") or ""),
        description="",
        status=status,
        completed=status is TaskStatus.DONE,
    )


def next_task_id(tasks: Iterable[Any]) -> int:
    """Max existing id + 1, or 1 for an empty list. Accepts Tasks or dicts."""
    ids = [int(t["id"] if isinstance(t, dict) else t.id) for t in tasks]
    if not ids:
        return 1
    return max(ids) + 1


def timestamp_id() -> int:
    """Fallback id (milliseconds since epoch) when the server omits one."""
    return int(time.time() * 1000)
