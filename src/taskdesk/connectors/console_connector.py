# src/taskdesk/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.render import render_toast
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def flush_toast(state: AppState) -> None:
    toast = state.toasts.pop()
    if toast is not None:
        _print_ts(render_toast(toast))


def handle_line(state: AppState, line: str) -> str | None:
    """
    Run one console line. Plain text (no leading slash) is treated as /add.

    Returns the reply to print (None/"" prints nothing).
    """
    if not line.startswith("/"):
        line = f"/add {line}"
    return command_registry.handle(state, line, emit=_print_ts)


def run_console_loop(state: AppState) -> None:
    logger.info("Console started (tasks=%d).", len(state.task_store.get_tasks()))
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskdesk"))

    _print_ts(f"[{app_name}] Task Manager. Use /help for commands, /exit to quit.\n")
    print(command_registry.handle(state, "/list"))
    flush_toast(state)

    while True:
        try:
            user_input = input("\n> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply:
            print(reply)
        flush_toast(state)

    logger.info("Console finished.")
