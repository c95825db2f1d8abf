# src/taskdesk/tasks/task_api.py

"""
High-level task helpers used by the console commands.

Local mutations are applied first and are authoritative. When remote sync is
on, the matching gateway call follows as a best-effort mirror: a failure is
reported as an error toast and never rolls the local change back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..core.state import AppState
from .errors import GatewayError
from .task_models import Task, TaskStatus, next_task_id

logger = logging.getLogger(__name__)

Emitter = Callable[[str], None]


def _mirror(state: AppState, what: str, call: Callable[[], Any], emit: Emitter | None = None) -> None:
    if not state.remote_sync:
        return
    if emit is not None:
        # network round-trip blocks the console; tell the user why
        emit(f"[SYNC] Sending {what} to the remote API...")
    try:
        call()
        logger.debug("Remote %s mirrored", what)
    except GatewayError as e:
        logger.info("Remote %s failed (status=%s): %s", what, e.status_code, e)
        state.toasts.show(f"Saved locally; remote sync failed: {e}", "error")


def create_task(
    state: AppState,
    *,
    title: str,
    description: str = "",
    status: TaskStatus | str = TaskStatus.TODO,
    emit: Emitter | None = None,
) -> Task:
    """
    Form submission: trim inputs, assign the next local id, add to the store.

    Raises ValidationError when the title is empty (store stays unchanged).
    """
    new_task = Task(
        id=next_task_id(state.task_store.get_tasks()),
        title=(title or "").strip(),
        description=(description or "").strip(),
        status=TaskStatus.normalize(status),
    )
    task = state.task_store.add_task(new_task)
    _mirror(state, "create", lambda: state.gateway.create_task(task), emit)
    return task


def edit_task(
    state: AppState,
    task_id: int,
    *,
    title: str | None = None,
    description: str | None = None,
    status: TaskStatus | str | None = None,
    emit: Emitter | None = None,
) -> Task | None:
    """
    Inline edit of one or more fields. Returns None when the id is unknown
    (nothing changes and no notification is emitted).

    An empty title raises ValidationError from the store.
    """
    current = state.task_store.get_task(task_id)
    if current is None:
        return None

    updated = Task(
        id=current.id,
        title=current.title if title is None else title,
        description=current.description if description is None else description.strip(),
        status=current.status if status is None else TaskStatus.normalize(status),
    )
    task = state.task_store.update_task(updated)
    _mirror(state, "update", lambda: state.gateway.update_task(task.id, task), emit)
    return task


def remove_task(state: AppState, task_id: int, *, emit: Emitter | None = None) -> bool:
    """Delete locally, then mirror. Unknown id is a no-op returning False."""
    removed = state.task_store.delete_task(task_id)
    if removed:
        _mirror(state, "delete", lambda: state.gateway.delete_task(task_id), emit)
    return removed
