"""In-memory task store kept in sync with the remote API.

Every operation runs in three steps so the network call can happen off the UI
thread:

1. ``prepare_*`` validates the draft and builds a ``Mutation`` (UI thread).
2. ``perform`` issues the gateway call (any thread).
3. ``apply`` / ``fail`` patch the state with the outcome (UI thread).

``load``, ``add``, ``toggle_completion``, ``remove`` and ``commit_edit`` chain
the three steps synchronously.

Each mutation carries a token from a monotonic counter. The store remembers the
latest update token issued per task id (and the latest load); update and load
responses carrying an older token are dropped, so the most recently issued
request wins no matter in which order responses arrive. Deletes and creates
always apply. A deleted id remembers the token counter at deletion time, and
updates issued before that point are dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Protocol

from todo_client.application import state as reducers
from todo_client.application.state import AppState
from todo_client.domain import edit_session
from todo_client.domain.edit_session import EditSession
from todo_client.domain.errors import ApiError, ValidationError
from todo_client.domain.models import SessionMode, Task, TaskId, format_deadline


logger = logging.getLogger(__name__)

_LIST_KEY = ("list",)


class TodoGateway(Protocol):
    def list_tasks(self) -> list[dict]: ...

    def create_task(self, body: dict) -> dict: ...

    def update_task(self, task_id: TaskId, body: dict) -> dict | None: ...

    def delete_task(self, task_id: TaskId) -> None: ...


class MutationKind(str, Enum):
    LIST = "list"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


_FAILURE_MESSAGES = {
    MutationKind.LIST: "Could not load tasks",
    MutationKind.CREATE: "Could not add the task",
    MutationKind.UPDATE: "Could not save the task",
    MutationKind.DELETE: "Could not delete the task",
}


@dataclass(frozen=True, slots=True)
class Mutation:
    kind: MutationKind
    token: int
    task_id: TaskId | None = None
    body: dict | None = None
    # Record to store when an update response carries no body.
    record: Task | None = None
    closes_edit: bool = False

    @property
    def key(self) -> tuple | None:
        if self.kind == MutationKind.LIST:
            return _LIST_KEY
        if self.kind == MutationKind.UPDATE:
            return ("task", self.task_id)
        return None


def perform(gateway: TodoGateway, mutation: Mutation) -> Any:
    """Issue the gateway call for ``mutation``. Raises ``ApiError`` on failure."""
    if mutation.kind == MutationKind.LIST:
        return gateway.list_tasks()
    if mutation.kind == MutationKind.CREATE:
        return gateway.create_task(mutation.body or {})
    if mutation.kind == MutationKind.UPDATE:
        return gateway.update_task(mutation.task_id, mutation.body or {})
    gateway.delete_task(mutation.task_id)
    return None


def validate_draft(title: str, deadline: datetime | None) -> str:
    cleaned = (title or "").strip()
    if not cleaned or deadline is None:
        raise ValidationError()
    return cleaned


class TaskStore:
    def __init__(self, gateway: TodoGateway | None = None, initial: AppState | None = None):
        self.gateway = gateway
        self.state = initial or AppState()
        self._next_token = 0
        self._latest: dict[tuple, int] = {}
        # Deleted id -> token counter when the delete was applied.
        self._gone: dict[TaskId, int] = {}

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self.state.tasks

    def find(self, task_id: TaskId) -> Task | None:
        return reducers.find_task(self.state, task_id)

    def in_flight(self, task_id: TaskId) -> bool:
        return ("task", task_id) in self._latest

    # ── prepare ────────────────────────────────────────

    def prepare_load(self) -> Mutation:
        return self._issue(MutationKind.LIST)

    def prepare_add(self, title: str, deadline: datetime | None) -> Mutation:
        cleaned = validate_draft(title, deadline)
        body = {
            "title": cleaned,
            "description": "",
            "completed": False,
            "deadline": format_deadline(deadline),
        }
        return self._issue(MutationKind.CREATE, body=body)

    def prepare_toggle(self, task_id: TaskId) -> Mutation | None:
        current = self.find(task_id)
        if current is None:
            logger.debug("Toggle ignored for unknown task id=%s", task_id)
            return None
        updated = replace(current, completed=not current.completed, extra=dict(current.extra))
        return self._issue(MutationKind.UPDATE, task_id=task_id, body=updated.to_wire(), record=updated)

    def prepare_remove(self, task_id: TaskId) -> Mutation:
        return self._issue(MutationKind.DELETE, task_id=task_id)

    def prepare_commit_edit(self, session: EditSession | None = None) -> Mutation:
        session = session or self.state.session
        if session.mode != SessionMode.EDITING or session.target is None:
            raise ValueError("commit_edit requires an editing session")
        cleaned = validate_draft(session.title, session.deadline)
        # Merge onto the freshest copy we hold so untouched fields are not lost.
        target = self.find(session.target.id) or session.target
        merged = Task(
            id=target.id,
            title=cleaned,
            description=target.description,
            completed=session.completed,
            deadline=session.deadline,
            raw_deadline=target.raw_deadline,
            extra=dict(target.extra),
        )
        return self._issue(
            MutationKind.UPDATE,
            task_id=target.id,
            body=merged.to_wire(),
            record=merged,
            closes_edit=True,
        )

    def _issue(self, kind: MutationKind, **fields) -> Mutation:
        self._next_token += 1
        mutation = Mutation(kind=kind, token=self._next_token, **fields)
        if mutation.key is not None:
            self._latest[mutation.key] = mutation.token
        return mutation

    # ── outcome ────────────────────────────────────────

    def is_stale(self, mutation: Mutation) -> bool:
        """True when a newer load/update superseded ``mutation`` or its task was deleted since."""
        if self._deleted_since(mutation):
            return True
        key = mutation.key
        if key is None:
            return False
        return self._latest.get(key) != mutation.token

    def _deleted_since(self, mutation: Mutation) -> bool:
        if mutation.kind != MutationKind.UPDATE:
            return False
        deleted_at = self._gone.get(mutation.task_id)
        return deleted_at is not None and mutation.token <= deleted_at

    def apply(self, mutation: Mutation, response: Any) -> bool:
        """Patch the state with a successful response. Returns False for stale responses."""
        if self.is_stale(mutation):
            logger.debug("Dropping stale %s response token=%s id=%s", mutation.kind.value, mutation.token, mutation.task_id)
            if mutation.closes_edit:
                # The save itself succeeded; only its record was superseded.
                self.state = reducers.session_changed(
                    self.state, edit_session.finish_edit(self.state.session, mutation.task_id)
                )
            return False
        self._settle(mutation)

        state = self.state
        if mutation.kind == MutationKind.LIST:
            state = reducers.tasks_loaded(state, (Task.from_wire(item) for item in response or []))
        elif mutation.kind == MutationKind.CREATE:
            state = reducers.task_appended(state, Task.from_wire(response))
            state = reducers.session_changed(state, edit_session.finish_create(state.session))
        elif mutation.kind == MutationKind.UPDATE:
            record = mutation.record
            if isinstance(response, dict) and "id" in response:
                record = Task.from_wire(response)
            if record is not None:
                state = reducers.task_replaced(state, record)
            if mutation.closes_edit:
                state = reducers.session_changed(state, edit_session.finish_edit(state.session, mutation.task_id))
        else:
            state = reducers.task_removed(state, mutation.task_id)
            self._gone[mutation.task_id] = self._next_token
            self._latest.pop(("task", mutation.task_id), None)

        self.state = reducers.error_cleared(state)
        logger.info("Applied %s id=%s (%d tasks)", mutation.kind.value, mutation.task_id, len(self.state.tasks))
        return True

    def fail(self, mutation: Mutation, error: Exception | str) -> str | None:
        """Record a failed call; tasks and session stay as they were.

        Returns the user-facing message, or None when a newer request (or a
        delete) already superseded ``mutation`` and the failure is not reported.
        A failed save from the edit modal is still reported unless its task was
        deleted meanwhile.
        """
        superseded = self.is_stale(mutation)
        if superseded and (not mutation.closes_edit or self._deleted_since(mutation)):
            logger.debug(
                "Ignoring failure of superseded %s token=%s id=%s: %s",
                mutation.kind.value,
                mutation.token,
                mutation.task_id,
                error,
            )
            return None
        if not superseded:
            self._settle(mutation)
        message = f"{_FAILURE_MESSAGES[mutation.kind]}: {error}"
        logger.warning("%s (token=%s id=%s)", message, mutation.token, mutation.task_id)
        self.state = reducers.error_reported(self.state, message)
        return message

    def _settle(self, mutation: Mutation) -> None:
        if mutation.key is not None:
            self._latest.pop(mutation.key, None)

    # ── synchronous operations ─────────────────────────

    def load(self) -> bool:
        return self._run(self.prepare_load())

    def add(self, title: str, deadline: datetime | None) -> bool:
        return self._run(self.prepare_add(title, deadline))

    def toggle_completion(self, task_id: TaskId) -> bool:
        mutation = self.prepare_toggle(task_id)
        if mutation is None:
            return False
        return self._run(mutation)

    def remove(self, task_id: TaskId) -> bool:
        return self._run(self.prepare_remove(task_id))

    def commit_edit(self, session: EditSession | None = None) -> bool:
        return self._run(self.prepare_commit_edit(session))

    def _run(self, mutation: Mutation) -> bool:
        if self.gateway is None:
            raise RuntimeError("TaskStore has no gateway")
        try:
            response = perform(self.gateway, mutation)
        except ApiError as exc:
            self.fail(mutation, exc)
            return False
        return self.apply(mutation, response)
