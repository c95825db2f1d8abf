# src/taskdesk/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task store and the console.

The store depends on Protocols instead of concrete implementations.
This keeps storage and the remote API swappable and makes testing easier.
"""

from typing import Any, Callable, Literal, Protocol

from ..tasks.task_models import Task

ToastKind = Literal["success", "error"]

Notify = Callable[[str, ToastKind], None]
# notify(message, kind): user-facing feedback after a store mutation.


class KeyValueStorage(Protocol):
    """Opaque string blobs by key (the local-storage analogue)."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class TaskGateway(Protocol):
    """Remote /todos API. Every method may raise a GatewayError subclass."""

    def fetch_tasks(self) -> list[Task]: ...
    def create_task(self, task: Task) -> Task: ...
    def update_task(self, task_id: int, task: Task) -> Any: ...
    def delete_task(self, task_id: int) -> dict[str, Any]: ...
    def close(self) -> None: ...
