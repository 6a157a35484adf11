# tests/test_task_store.py

from __future__ import annotations

from datetime import datetime

import pytest

from todo_client.application.state import AppState, session_changed
from todo_client.application.task_store import MutationKind, TaskStore, perform
from todo_client.domain import edit_session as es
from todo_client.domain.errors import ApiStatusError, ApiTransportError, ValidationError
from todo_client.domain.models import SessionMode, Task, format_deadline, parse_deadline

from .fakes import FakeTodoGateway


def test_load_replaces_tasks_in_server_order(store: TaskStore) -> None:
    assert [t.id for t in store.tasks] == [1, 2, 3]
    assert [t.completed for t in store.tasks] == [False, True, False]
    assert store.state.error_message == ""


def test_load_failure_leaves_state_untouched(store: TaskStore, gateway: FakeTodoGateway) -> None:
    before = store.tasks
    gateway.fail_with = ApiTransportError("boom")

    assert store.load() is False
    assert store.tasks == before
    assert "Could not load tasks" in store.state.error_message


def test_add_with_empty_title_makes_no_call(store: TaskStore, gateway: FakeTodoGateway, deadline: datetime) -> None:
    with pytest.raises(ValidationError):
        store.add("   ", deadline)
    assert gateway.calls == []
    assert len(store.tasks) == 3


def test_add_without_deadline_makes_no_call(store: TaskStore, gateway: FakeTodoGateway) -> None:
    with pytest.raises(ValidationError):
        store.add("buy milk", None)
    assert gateway.calls == []


def test_add_appends_server_record() -> None:
    gateway = FakeTodoGateway()
    store = TaskStore(gateway)
    store.state = AppState(session=es.begin_create(es.IDLE_SESSION))
    deadline = datetime(2024, 1, 1, 10, 0)

    assert store.add("  buy milk ", deadline)

    assert gateway.calls == [
        (
            "create",
            {"title": "buy milk", "description": "", "completed": False, "deadline": format_deadline(deadline)},
        )
    ]
    assert store.tasks == (Task(id=1, title="buy milk", deadline=deadline),)
    # Creation form resets once the server confirmed the task.
    assert store.state.session.mode == SessionMode.IDLE


def test_add_failure_keeps_draft_open(gateway: FakeTodoGateway) -> None:
    store = TaskStore(gateway)
    draft = es.set_title(es.begin_create(es.IDLE_SESSION), "buy milk")
    store.state = AppState(session=draft)
    gateway.fail_with = ApiStatusError(500)

    assert store.add(draft.title, draft.deadline) is False
    assert store.tasks == ()
    assert store.state.session == draft
    assert "HTTP 500" in store.state.error_message


def test_toggle_flips_completion_and_sends_full_record(store: TaskStore, gateway: FakeTodoGateway) -> None:
    assert store.toggle_completion(1)

    kind, (task_id, body) = gateway.calls[0]
    assert (kind, task_id) == ("update", 1)
    assert body["completed"] is True
    assert body["title"] == "buy milk"
    assert store.find(1).completed is True
    assert [t.id for t in store.tasks] == [1, 2, 3]


def test_toggle_unknown_id_is_a_noop(store: TaskStore, gateway: FakeTodoGateway) -> None:
    before = store.state
    assert store.toggle_completion(42) is False
    assert gateway.calls == []
    assert store.state == before


def test_toggle_with_empty_response_uses_sent_record(store: TaskStore, gateway: FakeTodoGateway) -> None:
    gateway.update_response = None
    assert store.toggle_completion(2)
    assert store.find(2).completed is False


def test_remove_drops_only_matching_record(store: TaskStore, gateway: FakeTodoGateway) -> None:
    assert store.remove(2)
    assert gateway.calls == [("delete", 2)]
    assert [t.id for t in store.tasks] == [1, 3]


def test_remove_failure_keeps_record(store: TaskStore, gateway: FakeTodoGateway) -> None:
    gateway.fail_with = ApiStatusError(404)
    assert store.remove(2) is False
    assert [t.id for t in store.tasks] == [1, 2, 3]


def test_commit_edit_sends_merged_record_and_closes_session() -> None:
    d1 = datetime(2024, 1, 1, 10, 0)
    d2 = datetime(2024, 2, 2, 12, 30)
    original = Task(id=5, title="old", description="note", completed=False, deadline=d1)
    gateway = FakeTodoGateway()
    store = TaskStore(gateway)
    store.state = AppState(tasks=(original,))

    session = es.begin_edit(store.state.session, original)
    session = es.set_title(session, "new")
    session = es.confirm_date(es.open_picker(session), d2.date())
    session = es.confirm_time(session, d2.time())
    store.state = AppState(tasks=store.tasks, session=session)

    assert store.commit_edit()

    assert gateway.calls == [
        (
            "update",
            (5, {"id": 5, "title": "new", "description": "note", "completed": False, "deadline": format_deadline(d2)}),
        )
    ]
    assert store.find(5).title == "new"
    assert store.find(5).deadline == d2
    assert store.state.session.mode == SessionMode.IDLE


def test_commit_edit_failure_keeps_session_open() -> None:
    original = Task(id=5, title="old", deadline=datetime(2024, 1, 1, 10, 0))
    gateway = FakeTodoGateway()
    gateway.fail_with = ApiTransportError("offline")
    store = TaskStore(gateway)
    session = es.set_title(es.begin_edit(es.IDLE_SESSION, original), "new")
    store.state = AppState(tasks=(original,), session=session)

    assert store.commit_edit() is False
    assert store.find(5).title == "old"
    assert store.state.session == session


def test_commit_edit_requires_editing_session(store: TaskStore) -> None:
    with pytest.raises(ValueError):
        store.commit_edit()


def test_latest_issued_update_wins_over_late_response(store: TaskStore) -> None:
    first = store.prepare_toggle(1)
    second = store.prepare_toggle(1)
    assert first.token < second.token
    assert store.in_flight(1)

    # Second response lands first; the older one must be ignored.
    assert store.apply(second, None)
    assert store.apply(first, None) is False
    assert store.find(1) == second.record
    assert not store.in_flight(1)


def test_stale_list_response_is_dropped(store: TaskStore) -> None:
    old = store.prepare_load()
    new = store.prepare_load()

    assert store.apply(new, [{"id": 9, "title": "fresh"}])
    assert store.apply(old, [{"id": 8, "title": "stale"}]) is False
    assert [t.id for t in store.tasks] == [9]


def test_creates_never_go_stale(store: TaskStore) -> None:
    a = store.prepare_add("one", datetime(2024, 1, 1))
    b = store.prepare_add("two", datetime(2024, 1, 1))
    assert a.kind == b.kind == MutationKind.CREATE

    assert store.apply(b, {"id": 11, "title": "two"})
    assert store.apply(a, {"id": 10, "title": "one"})
    assert [t.id for t in store.tasks][-2:] == [11, 10]


def test_success_clears_previous_error(store: TaskStore, gateway: FakeTodoGateway) -> None:
    gateway.fail_with = ApiTransportError("down")
    store.load()
    assert store.state.error_message

    gateway.fail_with = None
    assert store.load()
    assert store.state.error_message == ""


def test_store_without_gateway_refuses_synchronous_calls() -> None:
    with pytest.raises(RuntimeError):
        TaskStore().load()


def test_add_stores_exactly_what_the_server_returned() -> None:
    gateway = FakeTodoGateway()
    gateway.create_response = {
        "id": 1,
        "title": "Buy milk",
        "completed": False,
        "deadline": "2024-01-01T10:00:00Z",
        "description": "",
    }
    store = TaskStore(gateway)

    assert store.add("Buy milk", datetime(2024, 1, 1, 10, 0))

    (task,) = store.tasks
    assert task == Task.from_wire(gateway.create_response)
    assert task.id == 1
    assert task.deadline == parse_deadline("2024-01-01T10:00:00Z")


def test_delete_success_wins_over_later_toggle(store: TaskStore, gateway: FakeTodoGateway) -> None:
    delete = store.prepare_remove(2)
    toggle = store.prepare_toggle(2)

    assert store.apply(delete, perform(gateway, delete))
    assert [t.id for t in store.tasks] == [1, 3]

    # The toggle was issued before the delete landed; its outcome is moot.
    assert store.apply(toggle, toggle.body) is False
    assert [t.id for t in store.tasks] == [1, 3]
    assert store.fail(toggle, ApiStatusError(404)) is None
    assert store.state.error_message == ""


def test_toggle_after_applied_delete_is_a_noop(store: TaskStore, gateway: FakeTodoGateway) -> None:
    assert store.remove(2)
    gateway.calls.clear()

    assert store.toggle_completion(2) is False
    assert gateway.calls == []


def test_successful_save_closes_session_even_when_superseded(store: TaskStore, gateway: FakeTodoGateway) -> None:
    session = es.set_title(es.begin_edit(es.IDLE_SESSION, store.find(1)), "buy oat milk")
    store.state = session_changed(store.state, session)

    save = store.prepare_commit_edit()
    toggle = store.prepare_toggle(1)

    assert store.apply(save, perform(gateway, save)) is False
    assert store.state.session.mode == SessionMode.IDLE
    # The newer toggle owns the record.
    assert store.find(1).title == "buy milk"

    assert store.apply(toggle, perform(gateway, toggle))
    assert store.find(1).completed is True


def test_commit_edit_on_deleted_task_fails_and_keeps_session_open(
    store: TaskStore, gateway: FakeTodoGateway
) -> None:
    session = es.set_title(es.begin_edit(es.IDLE_SESSION, store.find(2)), "renamed")
    store.state = session_changed(store.state, session)
    assert store.remove(2)

    gateway.fail_with = ApiStatusError(404)
    assert store.commit_edit() is False

    assert store.state.session == session
    assert [t.id for t in store.tasks] == [1, 3]
    assert "HTTP 404" in store.state.error_message


def test_failure_of_superseded_update_is_not_reported(store: TaskStore) -> None:
    first = store.prepare_toggle(1)
    second = store.prepare_toggle(1)

    assert store.fail(first, ApiTransportError("slow")) is None
    assert store.state.error_message == ""
    assert store.in_flight(1)

    message = store.fail(second, ApiTransportError("slow"))
    assert message is not None and "Could not save the task" in message
    assert not store.in_flight(1)


def test_failed_save_is_reported_even_when_superseded(store: TaskStore) -> None:
    session = es.set_title(es.begin_edit(es.IDLE_SESSION, store.find(1)), "buy oat milk")
    store.state = session_changed(store.state, session)

    save = store.prepare_commit_edit()
    store.prepare_toggle(1)

    assert store.fail(save, ApiStatusError(500)) is not None
    assert store.state.session == session


def test_toggle_echoes_deadline_it_could_not_parse() -> None:
    gateway = FakeTodoGateway([{"id": 1, "title": "x", "completed": False, "deadline": "end of sprint"}])
    store = TaskStore(gateway)
    assert store.load()

    assert store.toggle_completion(1)

    _, (_, body) = gateway.calls[-1]
    assert body["deadline"] == "end of sprint"
