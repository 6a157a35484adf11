"""Application state and the pure reducers that derive new states from it."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from todo_client.domain.edit_session import IDLE_SESSION, EditSession
from todo_client.domain.filters import filter_tasks
from todo_client.domain.models import FilterMode, Task, TaskId


@dataclass(frozen=True, slots=True)
class AppState:
    tasks: tuple[Task, ...] = ()
    filter_mode: FilterMode = FilterMode.ALL
    dark_mode: bool = False
    help_visible: bool = False
    session: EditSession = IDLE_SESSION
    error_message: str = ""


def visible_tasks(state: AppState) -> list[Task]:
    return filter_tasks(state.tasks, state.filter_mode)


def find_task(state: AppState, task_id: TaskId) -> Task | None:
    for task in state.tasks:
        if task.id == task_id:
            return task
    return None


def tasks_loaded(state: AppState, tasks: Iterable[Task]) -> AppState:
    return replace(state, tasks=tuple(tasks))


def task_appended(state: AppState, task: Task) -> AppState:
    return replace(state, tasks=state.tasks + (task,))


def task_replaced(state: AppState, task: Task) -> AppState:
    return replace(state, tasks=tuple(task if t.id == task.id else t for t in state.tasks))


def task_removed(state: AppState, task_id: TaskId) -> AppState:
    return replace(state, tasks=tuple(t for t in state.tasks if t.id != task_id))


def filter_changed(state: AppState, mode: FilterMode) -> AppState:
    return replace(state, filter_mode=FilterMode(mode))


def dark_mode_changed(state: AppState, enabled: bool) -> AppState:
    return replace(state, dark_mode=bool(enabled))


def help_toggled(state: AppState, visible: bool | None = None) -> AppState:
    shown = (not state.help_visible) if visible is None else bool(visible)
    return replace(state, help_visible=shown)


def session_changed(state: AppState, session: EditSession) -> AppState:
    return replace(state, session=session)


def error_reported(state: AppState, message: str) -> AppState:
    return replace(state, error_message=message)


def error_cleared(state: AppState) -> AppState:
    return replace(state, error_message="")
