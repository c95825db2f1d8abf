# src/taskdesk/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.errors import ValidationError
from ..tasks.task_models import TaskStatus, parse_status
from .render import render_counts, render_filters, render_table

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw_args: bool = False,
    ) -> None:
        """
        raw_args=True passes the untouched text after the command name as a
        single argument (empty list when there is none), so spacing survives.
        """
        aliases = aliases or []
        names = [name.lower()] + [a.lower() for a in aliases]
        self._help[names[0]] = help_text
        for key in names:
            self._handlers[key] = handler
            if raw_args:
                self._raw.add(key)

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(None, 1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""
        if name in self._raw:
            args = [rest] if rest.strip() else []
        else:
            args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()

_STATUS_HINT = "Statuses: todo|t, in-progress|ip, done|d."


def _parse_id(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    lines: list[str] = []
    filters = render_filters(state.search_query, state.status_filter)
    if filters:
        lines.append(filters)
    lines.append(render_table(state.visible()))
    lines.append("")
    lines.append(render_counts(state.counts()))
    return "\n".join(lines)


def cmd_add(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /add <title> | <description> | <status>

    Description and status are optional. An unrecognized status falls back to To Do.
    """
    raw = args[0] if args else ""
    fields = [f.strip() for f in raw.split("|")]
    title = fields[0] if fields else ""
    description = fields[1] if len(fields) > 1 else ""
    status_raw = fields[2] if len(fields) > 2 else ""
    status: TaskStatus | str = parse_status(status_raw) or status_raw

    try:
        task = task_api.create_task(
            state, title=title, description=description, status=status, emit=emit
        )
    except ValidationError:
        return "Usage: /add <title> | <description> | <status>"
    return f"Added task {task.id}: {task.title} ({task.status})"


def cmd_edit(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /edit <id> title <text>
    /edit <id> desc <text>   (empty text clears the description)
    """
    usage = "Usage: /edit <id> title <text> | /edit <id> desc <text>"
    parts = args[0].split(None, 2) if args else []
    if len(parts) < 2:
        return usage

    task_id = _parse_id(parts[0])
    field_name = parts[1].lower()
    text = parts[2] if len(parts) > 2 else ""
    if task_id is None or field_name not in ("title", "desc", "description"):
        return usage

    try:
        if field_name == "title":
            task = task_api.edit_task(state, task_id, title=text, emit=emit)
        else:
            task = task_api.edit_task(state, task_id, description=text, emit=emit)
    except ValidationError:
        return ""

    if task is None:
        return f"Task {task_id} not found."
    return f"Task {task.id}: {task.title} - {task.description or '(no description)'}"


def cmd_status(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """/status <id> <status>"""
    if len(args) < 2:
        return f"Usage: /status <id> <status>. {_STATUS_HINT}"

    task_id = _parse_id(args[0])
    status = parse_status(" ".join(args[1:]))
    if task_id is None or status is None:
        return f"Usage: /status <id> <status>. {_STATUS_HINT}"

    task = task_api.edit_task(state, task_id, status=status, emit=emit)
    if task is None:
        return f"Task {task_id} not found."
    return f"Task {task.id} is now {task.status}."


def cmd_delete(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """/delete <id>"""
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /delete <id>"

    if not task_api.remove_task(state, task_id, emit=emit):
        return f"Task {task_id} not found."
    return f"Deleted task {task_id}."


def cmd_search(state: AppState, args: list[str]) -> str:
    """
    /search <text>  -> filter by title/description
    /search         -> clear the search
    """
    state.search_query = args[0].strip() if args else ""
    if not state.search_query:
        return "Search cleared."
    return f'Searching for "{state.search_query}": {len(state.visible())} task(s) match.'


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter <status> -> show only tasks with that status
    /filter          -> all statuses
    """
    if not args or args[0].lower() in ("all", "*"):
        state.status_filter = ""
        return "Status filter cleared (All Status)."

    status = parse_status(" ".join(args))
    if status is None:
        return f"Unknown status. {_STATUS_HINT}"

    state.status_filter = str(status)
    return f"Showing {status} tasks: {len(state.visible())} task(s)."


def cmd_counts(state: AppState, args: list[str]) -> str:
    return render_counts(state.counts())


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks (current search/filter) and counters.", aliases=["ls"])
registry.register(
    "add", cmd_add, help_text="Add a task: /add <title> | <description> | <status>.", raw_args=True
)
registry.register("edit", cmd_edit, help_text="Edit inline: /edit <id> title|desc <text>.", raw_args=True)
registry.register("status", cmd_status, help_text="Change status: /status <id> todo|ip|done.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm", "del"])
registry.register("search", cmd_search, help_text="Search title/description: /search [text].", raw_args=True)
registry.register("filter", cmd_filter, help_text="Filter by status: /filter [todo|ip|done|all].")
registry.register("counts", cmd_counts, help_text="Show total and per-status counters.")
