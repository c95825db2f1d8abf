# src/taskdesk/tasks/remote_gateway.py

"""
Remote task gateway (JSONPlaceholder-compatible /todos API).

Network I/O only: the gateway never touches the local store.
No automatic retries; callers surface the error and the user re-triggers.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .errors import CreateError, DeleteError, FetchError, GatewayError, TransportError
from .task_models import Task, TaskStatus, task_from_remote, timestamp_id

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_LIMIT = 20
DEFAULT_USER_ID = 1


def _make_timeout(timeout_s: float) -> httpx.Timeout:
    # keep connect short; read follows the configured budget
    return httpx.Timeout(
        connect=min(timeout_s, 5.0),
        read=timeout_s,
        write=min(timeout_s, 5.0),
        pool=min(timeout_s, 5.0),
    )


class RemoteTaskGateway:
    """
    Thin wrapper around the four /todos operations.

    The httpx client is injectable (tests pass one with a MockTransport);
    when omitted the gateway owns its client and close() releases it.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = 10.0,
        limit: int = DEFAULT_LIMIT,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._limit = max(1, int(limit))
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=_make_timeout(float(timeout)))

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> RemoteTaskGateway:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ---- low-level helpers ----

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        error_cls: type[GatewayError],
        message: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Issue one request; any transport error or non-2xx status becomes error_cls."""
        try:
            response = self._client.request(method, self._url(path), **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.info("%s %s failed: HTTP %s", method, path, status)
            raise error_cls(message, status_code=status) from e
        except httpx.HTTPError as e:
            logger.info("%s %s failed: %s", method, path, e.__class__.__name__)
            raise error_cls(message) from e
        return response

    @staticmethod
    def _payload(task: Task) -> dict[str, Any]:
        return {
            "title": task.title,
            "completed": TaskStatus.normalize(task.status) is TaskStatus.DONE,
            "description": task.description or "",
        }

    # ---- public API ----

    def fetch_tasks(self) -> list[Task]:
        """GET /todos?_limit=N -> first N items mapped into Tasks."""
        message = "Failed to fetch tasks. Please try again later."
        response = self._request(
            "GET",
            "/todos",
            params={"_limit": self._limit},
            error_cls=FetchError,
            message=message,
        )

        try:
            data = response.json()
        except ValueError as e:
            raise FetchError(message, status_code=response.status_code) from e

        if not isinstance(data, list):
            raise FetchError(message, status_code=response.status_code)

        tasks: list[Task] = []
        for item in data[: self._limit]:
            if not isinstance(item, dict) or "id" not in item:
                raise FetchError(message, status_code=response.status_code)
            try:
                tasks.append(task_from_remote(item))
            except (TypeError, ValueError) as e:
                raise FetchError(message, status_code=response.status_code) from e

        logger.debug("Fetched %d remote tasks", len(tasks))
        return tasks

    def create_task(self, task: Task) -> Task:
        """
        POST /todos.

        The returned Task takes its id from the response (timestamp fallback
        when the server omits one) and every other field from `task`.
        """
        body = {"userId": DEFAULT_USER_ID, **self._payload(task)}
        response = self._request(
            "POST",
            "/todos",
            json=body,
            error_cls=CreateError,
            message="Failed to add task",
        )

        try:
            data = response.json()
        except ValueError:
            data = {}

        raw_id = data.get("id") if isinstance(data, dict) else None
        try:
            new_id = int(raw_id) if raw_id else timestamp_id()
        except (TypeError, ValueError):
            new_id = timestamp_id()

        created = Task(
            id=new_id,
            title=task.title,
            description=task.description or "",
            status=task.status,
        ).normalized()
        logger.debug("Remote create ok id=%s", created.id)
        return created

    def update_task(self, task_id: int, task: Task) -> Any:
        """PATCH /todos/{id}; returns the raw response body."""
        response = self._request(
            "PATCH",
            f"/todos/{int(task_id)}",
            json=self._payload(task),
            error_cls=TransportError,
            message="Failed to update task",
        )
        try:
            return response.json()
        except ValueError:
            return {}

    def delete_task(self, task_id: int) -> dict[str, Any]:
        self._request(
            "DELETE",
            f"/todos/{int(task_id)}",
            error_cls=DeleteError,
            message="Failed to delete task",
        )
        return {"success": True, "id": task_id, "message": "Task deleted successfully"}
