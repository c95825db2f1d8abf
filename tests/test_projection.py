# tests/test_projection.py

from __future__ import annotations

from taskdesk.tasks.projection import count_tasks, visible_tasks
from taskdesk.tasks.task_models import Task, TaskStatus


def _tasks() -> list[Task]:
    return [
        Task(id=1, title="Buy milk", status=TaskStatus.TODO),
        Task(
            id=2,
            title="Ship report",
            description="to milk factory",
            status=TaskStatus.DONE,
            completed=True,
        ),
        Task(id=3, title="Review PR", description="backend", status=TaskStatus.IN_PROGRESS),
    ]


def test_no_filters_returns_everything_in_order() -> None:
    tasks = _tasks()
    assert visible_tasks(tasks, "", "") == tasks


def test_query_matches_title_or_description_case_insensitively() -> None:
    tasks = _tasks()
    assert [t.id for t in visible_tasks(tasks, "milk", "")] == [1, 2]
    assert [t.id for t in visible_tasks(tasks, "MILK", "")] == [1, 2]
    assert [t.id for t in visible_tasks(tasks, "Backend", "")] == [3]
    assert visible_tasks(tasks, "nothing", "") == []


def test_status_filter_is_exact() -> None:
    tasks = _tasks()
    assert [t.id for t in visible_tasks(tasks, "", "Done")] == [2]
    assert [t.id for t in visible_tasks(tasks, "", "In Progress")] == [3]
    assert visible_tasks(tasks, "", "done") == []


def test_filters_compose_with_and() -> None:
    tasks = _tasks()
    assert [t.id for t in visible_tasks(tasks, "milk", "To Do")] == [1]
    assert visible_tasks(tasks, "review", "Done") == []


def test_counts_ignore_filters() -> None:
    counts = count_tasks(_tasks())
    assert counts.total == 3
    assert (counts.todo, counts.in_progress, counts.done) == (1, 1, 1)
    assert counts.by_status()[TaskStatus.DONE] == 1
    assert count_tasks([]).total == 0
