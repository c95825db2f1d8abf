# tests/test_remote_gateway.py

from __future__ import annotations

import json

import httpx
import pytest

from taskdesk.tasks.errors import CreateError, DeleteError, FetchError, TransportError
from taskdesk.tasks.remote_gateway import RemoteTaskGateway
from taskdesk.tasks.task_models import Task, TaskStatus

BASE = "https://api.test"


def _gateway(handler) -> tuple[RemoteTaskGateway, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    client = httpx.Client(transport=httpx.MockTransport(record))
    return RemoteTaskGateway(BASE, client=client), seen


def _todos(n: int) -> list[dict]:
    return [
        {"userId": 1, "id": i, "title": f"todo {i}", "completed": i % 2 == 0}
        for i in range(1, n + 1)
    ]


def test_fetch_tasks_limits_and_maps() -> None:
    gw, seen = _gateway(lambda req: httpx.Response(200, json=_todos(25)))

    tasks = gw.fetch_tasks()

    assert len(tasks) == 20
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/todos"
    assert seen[0].url.params["_limit"] == "20"
    assert tasks[0] == Task(id=1, title="todo 1", description="", status=TaskStatus.TODO)
    assert tasks[1].status is TaskStatus.DONE
    assert tasks[1].completed is True


def test_fetch_tasks_http_error() -> None:
    gw, _ = _gateway(lambda req: httpx.Response(503))
    with pytest.raises(FetchError) as excinfo:
        gw.fetch_tasks()
    assert excinfo.value.status_code == 503
    assert "Failed to fetch tasks" in str(excinfo.value)


def test_fetch_tasks_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    gw, _ = _gateway(handler)
    with pytest.raises(FetchError):
        gw.fetch_tasks()


@pytest.mark.parametrize(
    "body",
    [b"not json", b'{"id": 1}', b'[{"title": "no id"}]', b'["x"]'],
)
def test_fetch_tasks_malformed_body(body: bytes) -> None:
    gw, _ = _gateway(lambda req: httpx.Response(200, content=body))
    with pytest.raises(FetchError):
        gw.fetch_tasks()


def test_create_task_uses_response_id_and_caller_fields() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        return httpx.Response(201, json={**body, "id": 201})

    gw, seen = _gateway(handler)
    created = gw.create_task(
        Task(id=7, title="Write docs", description="api", status=TaskStatus.DONE)
    )

    sent = json.loads(seen[0].content)
    assert seen[0].method == "POST"
    assert sent == {"userId": 1, "title": "Write docs", "completed": True, "description": "api"}
    assert created == Task(
        id=201, title="Write docs", description="api", status=TaskStatus.DONE, completed=True
    )


def test_create_task_falls_back_to_timestamp_id() -> None:
    gw, _ = _gateway(lambda req: httpx.Response(201, json={}))
    created = gw.create_task(Task(id=7, title="x"))
    assert created.id > 1_000_000_000_000


def test_create_task_error() -> None:
    gw, _ = _gateway(lambda req: httpx.Response(500))
    with pytest.raises(CreateError):
        gw.create_task(Task(id=1, title="x"))


def test_update_task_returns_raw_body() -> None:
    gw, seen = _gateway(lambda req: httpx.Response(200, json={"id": 3, "title": "y"}))

    raw = gw.update_task(3, Task(id=3, title="y", status=TaskStatus.IN_PROGRESS))

    assert raw == {"id": 3, "title": "y"}
    assert seen[0].method == "PATCH"
    assert seen[0].url.path == "/todos/3"
    assert json.loads(seen[0].content) == {"title": "y", "completed": False, "description": ""}


def test_update_task_error_is_transport_error() -> None:
    gw, _ = _gateway(lambda req: httpx.Response(500))
    with pytest.raises(TransportError) as excinfo:
        gw.update_task(3, Task(id=3, title="y"))
    assert excinfo.value.status_code == 500


def test_delete_task() -> None:
    gw, seen = _gateway(lambda req: httpx.Response(200, json={}))
    result = gw.delete_task(4)
    assert result["success"] is True
    assert result["id"] == 4
    assert seen[0].method == "DELETE"
    assert seen[0].url.path == "/todos/4"


def test_delete_task_error() -> None:
    gw, _ = _gateway(lambda req: httpx.Response(404))
    with pytest.raises(DeleteError):
        gw.delete_task(4)


def test_injected_client_is_not_closed() -> None:
    client = httpx.Client(transport=httpx.MockTransport(lambda req: httpx.Response(200, json=[])))
    with RemoteTaskGateway(BASE, client=client) as gw:
        assert gw.fetch_tasks() == []
    assert client.is_closed is False
    client.close()
