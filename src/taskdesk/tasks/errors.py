# src/taskdesk/tasks/errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for task subsystem errors. `str(err)` is user-facing."""


class GatewayError(TaskError):
    """The remote call failed or returned an error status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FetchError(GatewayError):
    pass


class CreateError(GatewayError):
    pass


class DeleteError(GatewayError):
    pass


class TransportError(GatewayError):
    pass


class ValidationError(TaskError):
    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(TaskError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found.")
        self.task_id = task_id
