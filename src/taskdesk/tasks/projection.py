# src/taskdesk/tasks/projection.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .task_models import Task, TaskStatus


@dataclass(slots=True, frozen=True)
class TaskCounts:
    total: int
    todo: int
    in_progress: int
    done: int

    def by_status(self) -> dict[TaskStatus, int]:
        return {
            TaskStatus.TODO: self.todo,
            TaskStatus.IN_PROGRESS: self.in_progress,
            TaskStatus.DONE: self.done,
        }


def visible_tasks(
    tasks: Iterable[Task],
    query: str = "",
    status_filter: str = "",
) -> list[Task]:
    """
    Tasks matching the search query AND the status filter, in input order.

    - query: case-insensitive substring of title or description; "" matches all
    - status_filter: exact status value; "" matches all
    """
    needle = (query or "").lower()
    out: list[Task] = []
    for task in tasks:
        if needle and needle not in task.title.lower() and needle not in (task.description or "").lower():
            continue
        if status_filter and str(task.status) != str(status_filter):
            continue
        out.append(task)
    return out


def count_tasks(tasks: Iterable[Task]) -> TaskCounts:
    """Counters over the full list, independent of any active filter."""
    items = list(tasks)
    return TaskCounts(
        total=len(items),
        todo=sum(1 for t in items if t.status == TaskStatus.TODO),
        in_progress=sum(1 for t in items if t.status == TaskStatus.IN_PROGRESS),
        done=sum(1 for t in items if t.status == TaskStatus.DONE),
    )
