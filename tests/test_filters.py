# tests/test_filters.py

from __future__ import annotations

from todo_client.application.state import AppState, filter_changed, visible_tasks
from todo_client.domain.filters import filter_tasks
from todo_client.domain.models import FilterMode, Task


def _tasks() -> list[Task]:
    return [
        Task(id=1, title="a", completed=False),
        Task(id=2, title="b", completed=True),
        Task(id=3, title="c", completed=False),
        Task(id=4, title="d", completed=True),
    ]


def test_all_keeps_everything_in_order() -> None:
    tasks = _tasks()
    assert [t.id for t in filter_tasks(tasks, FilterMode.ALL)] == [1, 2, 3, 4]


def test_completed_and_pending_partition_the_list() -> None:
    tasks = _tasks()
    done = filter_tasks(tasks, FilterMode.COMPLETED)
    pending = filter_tasks(tasks, FilterMode.PENDING)

    assert [t.id for t in done] == [2, 4]
    assert [t.id for t in pending] == [1, 3]
    assert all(t.completed for t in done)
    assert not any(t.completed for t in pending)


def test_empty_input_yields_empty_list() -> None:
    for mode in FilterMode:
        assert filter_tasks([], mode) == []


def test_visible_tasks_follow_state_filter() -> None:
    state = AppState(tasks=tuple(_tasks()))
    state = filter_changed(state, FilterMode.PENDING)

    assert [t.id for t in visible_tasks(state)] == [1, 3]
    # Filtering never drops records from the store itself.
    assert len(state.tasks) == 4
