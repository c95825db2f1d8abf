# tests/fakes.py

from __future__ import annotations

from typing import Any

from taskdesk.tasks.errors import CreateError, DeleteError, FetchError, TransportError
from taskdesk.tasks.task_models import Task


class MemoryStorage:
    """In-memory KeyValueStorage; counts writes for snapshot-discipline tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get_item(self, key: str) -> str | None:
        return self.data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.writes += 1
        self.data[key] = value

    def remove_item(self, key: str) -> None:
        self.data.pop(key, None)


class FakeGateway:
    """
    Deterministic TaskGateway for unit tests.

    - Captures calls for assertions
    - `fail=True` makes every call raise the matching GatewayError
    """

    def __init__(self, tasks: list[Task] | None = None, *, fail: bool = False) -> None:
        self.tasks = list(tasks or [])
        self.fail = fail
        self.calls: list[tuple[str, Any]] = []
        self.closed = False

    def fetch_tasks(self) -> list[Task]:
        self.calls.append(("fetch", None))
        if self.fail:
            raise FetchError("Failed to fetch tasks. Please try again later.")
        return list(self.tasks)

    def create_task(self, task: Task) -> Task:
        self.calls.append(("create", task))
        if self.fail:
            raise CreateError("Failed to add task")
        return task

    def update_task(self, task_id: int, task: Task) -> Any:
        self.calls.append(("update", task_id))
        if self.fail:
            raise TransportError("Failed to update task", status_code=500)
        return {"id": task_id}

    def delete_task(self, task_id: int) -> dict[str, Any]:
        self.calls.append(("delete", task_id))
        if self.fail:
            raise DeleteError("Failed to delete task")
        return {"success": True, "id": task_id}

    def close(self) -> None:
        self.closed = True


class ReadOnlyStorage(MemoryStorage):
    """MemoryStorage whose writes fail like a full or read-only disk."""

    def set_item(self, key: str, value: str) -> None:
        raise OSError(28, "No space left on device")
