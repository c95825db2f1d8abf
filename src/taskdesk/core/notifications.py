# src/taskdesk/core/notifications.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from .ports import ToastKind

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Toast:
    message: str
    kind: ToastKind = "success"


class ToastCenter:
    """Holds the latest toast until the console prints and clears it."""

    def __init__(self) -> None:
        self._current: Toast | None = None

    @property
    def current(self) -> Toast | None:
        return self._current

    def show(self, message: str, kind: ToastKind = "success") -> None:
        self._current = Toast(message=message, kind=kind)
        logger.debug("Toast [%s] %s", kind, message)

    def clear(self) -> None:
        self._current = None

    def pop(self) -> Toast | None:
        toast, self._current = self._current, None
        return toast
