# src/taskdesk/tasks/task_store.py

from __future__ import annotations

import json
import logging

from ..core.ports import KeyValueStorage, Notify, TaskGateway, ToastKind
from .errors import ValidationError
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_KEY = "tasks"


class TaskStore:
    """
    In-memory task list mirrored into a key-value snapshot.

    Lifecycle:
    - initialize() once per session: load the snapshot, or seed from the
      remote gateway when no non-empty snapshot exists
    - add/update/delete are the only write path; each one overwrites the
      full snapshot (no diffing) and emits a notification

    Single-threaded: callers serialize mutations (one console command at a time).
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = DEFAULT_KEY,
        notify: Notify | None = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._notify = notify
        self._tasks: list[Task] = []
        self._initialized = False

    # ---- low-level helpers ----

    def _emit(self, message: str, kind: ToastKind = "success") -> None:
        if self._notify is None:
            return
        try:
            self._notify(message, kind)
        except Exception:
            logger.exception("Notification callback failed.")

    def _persist(self) -> None:
        payload = json.dumps([t.to_dict() for t in self._tasks], ensure_ascii=False)
        self._storage.set_item(self._key, payload)

    def _index_of(self, task_id: int) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    # ---- lifecycle ----

    @property
    def initialized(self) -> bool:
        return self._initialized

    def load_snapshot(self) -> bool:
        """
        Load the persisted list. Returns True when a non-empty snapshot was found.

        - not JSON / not a list: logged and treated as absent
        - bad rows are logged and skipped one by one; the readable rows are kept
          and the snapshot still counts as present, so no remote seed replaces it
        """
        raw = self._storage.get_item(self._key)
        if not raw:
            return False
        try:
            data = json.loads(raw)
        except ValueError:
            logger.exception("Ignoring unreadable task snapshot key=%s", self._key)
            return False
        if not isinstance(data, list):
            logger.warning("Ignoring task snapshot key=%s: not a list", self._key)
            return False
        if not data:
            return False

        tasks: list[Task] = []
        for pos, item in enumerate(data):
            try:
                if not isinstance(item, dict):
                    raise TypeError("row is not an object")
                tasks.append(Task.from_dict(item))
            except (TypeError, KeyError, ValueError):
                logger.warning("Skipping unreadable snapshot row #%d: %r", pos, item)

        self._tasks = tasks
        skipped = len(data) - len(tasks)
        logger.info("Loaded %d tasks from snapshot (skipped=%d)", len(tasks), skipped)
        return True

    def seed_from(self, gateway: TaskGateway) -> int:
        """
        Populate an empty store from the remote API and persist immediately.

        Gateway errors propagate. Returns the number of seeded tasks.
        """
        if self._tasks:
            return 0
        seeded = [t.normalized() for t in gateway.fetch_tasks()]
        # a snapshot may have appeared meanwhile; the local list wins
        if self._tasks:
            return 0
        self._tasks = seeded
        self._persist()
        logger.info("Seeded %d tasks from remote API", len(seeded))
        return len(seeded)

    def initialize(self, gateway: TaskGateway) -> None:
        if self._initialized:
            return
        if not self.load_snapshot():
            self.seed_from(gateway)
        self._initialized = True

    # ---- public API ----

    def get_tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        idx = self._index_of(int(task_id))
        return None if idx is None else self._tasks[idx]

    def _require_title(self, task: Task) -> str:
        title = (task.title or "").strip()
        if not title:
            self._emit("Title is required", "error")
            raise ValidationError("Title is required", field="title")
        return title

    def add_task(self, new_task: Task) -> Task:
        title = self._require_title(new_task)

        task = Task(
            id=int(new_task.id),
            title=title,
            description=new_task.description or "",
            status=new_task.status,
        ).normalized()

        self._tasks.append(task)
        self._persist()
        logger.debug("Task added id=%s status=%s", task.id, task.status)
        self._emit("Task added successfully")
        return task

    def update_task(self, updated: Task) -> Task:
        """
        Replace the task with the same id. Unknown id: silent no-op.

        An empty title (after trim) raises ValidationError; the list is unchanged.
        """
        task = updated.normalized()
        idx = self._index_of(task.id)
        if idx is None:
            logger.debug("update_task: id=%s not found, ignoring", task.id)
            return task

        task.title = self._require_title(task)
        self._tasks[idx] = task
        self._persist()
        logger.debug("Task updated id=%s status=%s", task.id, task.status)
        self._emit("Task updated successfully")
        return task

    def delete_task(self, task_id: int) -> bool:
        """Remove by id. Unknown id: silent no-op returning False."""
        idx = self._index_of(int(task_id))
        if idx is None:
            logger.debug("delete_task: id=%s not found, ignoring", task_id)
            return False

        del self._tasks[idx]
        self._persist()
        logger.debug("Task deleted id=%s", task_id)
        self._emit("Task deleted successfully")
        return True
