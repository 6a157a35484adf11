# tests/test_models.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from todo_client.domain.models import Task, format_deadline, parse_deadline


def test_format_deadline_is_utc_with_milliseconds() -> None:
    local = datetime(2024, 1, 1, 10, 0).astimezone()
    expected = local.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S") + ".000Z"
    assert format_deadline(datetime(2024, 1, 1, 10, 0)) == expected
    assert format_deadline(None) is None


def test_parse_deadline_returns_naive_local_time() -> None:
    parsed = parse_deadline(format_deadline(datetime(2024, 3, 1, 14, 30)))
    assert parsed == datetime(2024, 3, 1, 14, 30)
    assert parsed.tzinfo is None


def test_parse_deadline_tolerates_missing_and_garbage() -> None:
    assert parse_deadline(None) is None
    assert parse_deadline("") is None
    assert parse_deadline("tomorrow-ish") is None


def test_from_wire_keeps_unknown_fields_and_echoes_them() -> None:
    item = {
        "id": "abc",
        "title": "write report",
        "description": None,
        "completed": 1,
        "deadline": None,
        "created_at": "2024-01-01T00:00:00Z",
    }
    task = Task.from_wire(item)

    assert task.id == "abc"
    assert task.description == ""
    assert task.completed is True
    assert task.extra == {"created_at": "2024-01-01T00:00:00Z"}

    body = task.to_wire()
    assert body["created_at"] == "2024-01-01T00:00:00Z"
    assert body["id"] == "abc"
    assert body["deadline"] is None


def test_is_overdue_only_for_pending_past_deadlines() -> None:
    past = datetime.now() - timedelta(hours=1)
    future = datetime.now() + timedelta(days=1)

    assert Task(id=1, title="x", deadline=past).is_overdue
    assert not Task(id=1, title="x", deadline=past, completed=True).is_overdue
    assert not Task(id=1, title="x", deadline=future).is_overdue
    assert not Task(id=1, title="x").is_overdue


def test_unparseable_deadline_is_kept_verbatim() -> None:
    task = Task.from_wire({"id": 1, "title": "x", "deadline": "end of sprint"})

    assert task.deadline is None
    assert task.to_wire()["deadline"] == "end of sprint"
    # A parsed deadline is always re-serialized.
    parsed = Task.from_wire({"id": 1, "title": "x", "deadline": "2024-01-01T10:00:00Z"})
    assert parsed.raw_deadline is None
