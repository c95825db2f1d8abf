# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskdesk.cli.bootstrap import create_initial_state
from taskdesk.core.state import AppState
from taskdesk.tasks.task_models import Task, TaskStatus

from .fakes import FakeGateway, MemoryStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the composition root.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskdesk-test",
        log_level="DEBUG",
        api_base_url="https://api.test",
        http_timeout_seconds=1.0,
        seed_limit=20,
        remote_sync=True,
        data_dir=tmp_path,
        storage_path=tmp_path / "storage.json",
        storage_key="tasks",
    )


@pytest.fixture()
def remote_tasks() -> list[Task]:
    return [
        Task(id=1, title="delectus aut autem", status=TaskStatus.TODO),
        Task(id=2, title="quis ut nam facilis", status=TaskStatus.DONE, completed=True),
    ]


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def gateway(remote_tasks: list[Task]) -> FakeGateway:
    return FakeGateway(remote_tasks)


@pytest.fixture()
def state(settings: SimpleNamespace, storage: MemoryStorage, gateway: FakeGateway) -> AppState:
    """
    AppState wired with deterministic fakes and already initialized
    (seeded from the fake gateway).
    """
    st = create_initial_state(settings=settings, storage=storage, gateway=gateway)
    st.task_store.initialize(gateway)
    st.toasts.clear()
    return st
