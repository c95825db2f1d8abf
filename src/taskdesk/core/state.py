# src/taskdesk/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.projection import TaskCounts, count_tasks, visible_tasks
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore
from .notifications import ToastCenter
from .ports import TaskGateway


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: Any

    task_store: TaskStore
    gateway: TaskGateway
    toasts: ToastCenter = field(default_factory=ToastCenter)

    remote_sync: bool = True

    # View state owned by the console (never a copy of the task list).
    search_query: str = ""
    status_filter: str = ""

    is_loading: bool = False
    error: str | None = None

    def visible(self) -> list[Task]:
        return visible_tasks(self.task_store.get_tasks(), self.search_query, self.status_filter)

    def counts(self) -> TaskCounts:
        return count_tasks(self.task_store.get_tasks())
