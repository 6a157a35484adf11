"""Edit session state machine shared by the creation form and the edit dialog.

Sessions are immutable; every transition returns a new ``EditSession``.
Transitions that do not apply to the current state return the session unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime, time

from todo_client.domain.models import PickerStage, SessionMode, Task


@dataclass(frozen=True, slots=True)
class EditSession:
    mode: SessionMode = SessionMode.IDLE
    target: Task | None = None
    title: str = ""
    deadline: datetime | None = None
    completed: bool = False
    picker: PickerStage = PickerStage.CLOSED

    @property
    def is_active(self) -> bool:
        return self.mode != SessionMode.IDLE


IDLE_SESSION = EditSession()


def begin_create(session: EditSession, now: datetime | None = None) -> EditSession:
    if session.mode != SessionMode.IDLE:
        return session
    return EditSession(
        mode=SessionMode.CREATING,
        title="",
        deadline=now or datetime.now(),
        completed=False,
    )


def begin_edit(session: EditSession, task: Task) -> EditSession:
    # Selecting "edit" abandons whatever draft was in progress.
    return EditSession(
        mode=SessionMode.EDITING,
        target=task,
        title=task.title,
        deadline=task.deadline,
        completed=task.completed,
    )


def cancel(session: EditSession) -> EditSession:
    return IDLE_SESSION


def finish_create(session: EditSession) -> EditSession:
    if session.mode != SessionMode.CREATING:
        return session
    return IDLE_SESSION


def finish_edit(session: EditSession, task_id) -> EditSession:
    """Close an editing session after its save succeeded.

    A session that meanwhile moved on to another task is left alone.
    """
    if session.mode != SessionMode.EDITING or session.target is None:
        return session
    if session.target.id != task_id:
        return session
    return IDLE_SESSION


def set_title(session: EditSession, title: str) -> EditSession:
    if not session.is_active:
        return session
    return replace(session, title=title)


def set_completed(session: EditSession, completed: bool) -> EditSession:
    if not session.is_active:
        return session
    return replace(session, completed=bool(completed))


# ── deadline staging ────────────────────────────────────


def open_picker(session: EditSession) -> EditSession:
    if not session.is_active or session.picker != PickerStage.CLOSED:
        return session
    return replace(session, picker=PickerStage.AWAITING_DATE)


def confirm_date(
    session: EditSession,
    chosen: date,
    *,
    separate_time_step: bool = True,
    now: datetime | None = None,
) -> EditSession:
    """Stage ``chosen`` keeping the previously staged time of day."""
    if session.picker != PickerStage.AWAITING_DATE:
        return session
    base = session.deadline or now or datetime.now()
    staged = datetime.combine(chosen, base.time())
    next_stage = PickerStage.AWAITING_TIME if separate_time_step else PickerStage.CLOSED
    return replace(session, deadline=staged, picker=next_stage)


def confirm_time(session: EditSession, chosen: time) -> EditSession:
    if session.picker != PickerStage.AWAITING_TIME or session.deadline is None:
        return session
    staged = session.deadline.replace(hour=chosen.hour, minute=chosen.minute, second=0, microsecond=0)
    return replace(session, deadline=staged, picker=PickerStage.CLOSED)


def dismiss_picker(session: EditSession) -> EditSession:
    if session.picker == PickerStage.CLOSED:
        return session
    return replace(session, picker=PickerStage.CLOSED)
