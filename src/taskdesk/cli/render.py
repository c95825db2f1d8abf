# src/taskdesk/cli/render.py

"""Plain-text rendering of the task table, status badges and counters."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.notifications import Toast
from ..tasks.projection import TaskCounts
from ..tasks.task_models import Task, TaskStatus

EMPTY_PLACEHOLDER = "No Tasks Available"

_BADGES = {
    TaskStatus.TODO: "[ To Do ]",
    TaskStatus.IN_PROGRESS: "[ In Progress ]",
    TaskStatus.DONE: "[ Done ]",
}

_ID_W = 5
_TITLE_W = 32
_DESC_W = 36


def status_badge(status: TaskStatus | str | None) -> str:
    """Missing/unknown status renders as To Do."""
    return _BADGES[TaskStatus.normalize(status)]


def _clip(text: str, width: int) -> str:
    text = (text or "").replace("\n", " ")
    if len(text) <= width:
        return text.ljust(width)
    return text[: width - 1] + "…"


def render_table(tasks: Sequence[Task]) -> str:
    if not tasks:
        return EMPTY_PLACEHOLDER

    header = f"{'ID'.ljust(_ID_W)} {'Title'.ljust(_TITLE_W)} {'Description'.ljust(_DESC_W)} Status"
    lines = [header, "-" * len(header)]
    for t in tasks:
        lines.append(
            f"{str(t.id).ljust(_ID_W)} {_clip(t.title, _TITLE_W)} "
            f"{_clip(t.description, _DESC_W)} {status_badge(t.status)}"
        )
    return "\n".join(lines)


def render_counts(counts: TaskCounts) -> str:
    return (
        f"Total: {counts.total}  "
        f"To Do: {counts.todo}  "
        f"In Progress: {counts.in_progress}  "
        f"Done: {counts.done}"
    )


def render_filters(query: str, status_filter: str) -> str | None:
    parts: list[str] = []
    if query:
        parts.append(f'search="{query}"')
    if status_filter:
        parts.append(f"status={status_filter}")
    if not parts:
        return None
    return "Filters: " + ", ".join(parts)


def render_toast(toast: Toast) -> str:
    tag = "OK" if toast.kind == "success" else "ERROR"
    return f"[{tag}] {toast.message}"


def render_load_error(message: str) -> str:
    return "\n".join(
        [
            "=" * 40,
            "Error Loading Tasks",
            message,
            "=" * 40,
        ]
    )
