# src/taskdesk/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations into AppState (storage/gateway/store/toasts),
- runs the one-time initial load (snapshot or remote seed).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.notifications import ToastCenter
from ..core.ports import KeyValueStorage, TaskGateway
from ..core.state import AppState
from ..tasks.errors import TaskError
from ..tasks.remote_gateway import RemoteTaskGateway
from ..tasks.snapshot import JsonFileStorage
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings=None,
    storage: KeyValueStorage | None = None,
    gateway: TaskGateway | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the storage/gateway collaborators) injectable makes
    the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if storage is None:
        _ensure_local_dirs(settings)
        storage = JsonFileStorage(settings.storage_path)

    if gateway is None:
        gateway = RemoteTaskGateway(
            settings.api_base_url,
            timeout=settings.http_timeout_seconds,
            limit=settings.seed_limit,
        )

    toasts = ToastCenter()
    store = TaskStore(storage, key=settings.storage_key, notify=toasts.show)

    return AppState(
        settings=settings,
        task_store=store,
        gateway=gateway,
        toasts=toasts,
        remote_sync=bool(getattr(settings, "remote_sync", True)),
    )


def load_tasks(state: AppState) -> bool:
    """
    Initial load: snapshot first, remote seed otherwise.

    On failure the state carries a full-page error (state.error) plus an
    error toast; nothing is retried. Returns True on success.
    """
    state.is_loading = True
    try:
        state.task_store.initialize(state.gateway)
        state.error = None
        return True
    except TaskError as e:
        logger.info("Initial task load failed: %s", e)
        state.error = str(e)
        state.toasts.show(str(e), "error")
        return False
    except OSError as e:
        logger.exception("Initial task load could not write the local snapshot.")
        state.error = f"Failed to save tasks locally: {e}"
        state.toasts.show(state.error, "error")
        return False
    finally:
        state.is_loading = False


def shutdown(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        state.gateway.close()
    except Exception:
        logger.debug("Gateway close failed.", exc_info=True)
