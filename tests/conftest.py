# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from todo_client.application.task_store import TaskStore
from todo_client.infrastructure.cache.json_cache import JsonCache

from .fakes import FakeTodoGateway


@pytest.fixture()
def deadline() -> datetime:
    return datetime(2024, 1, 1, 10, 0)


@pytest.fixture()
def server_items(deadline: datetime) -> list[dict]:
    """Three records in server order; the middle one is done."""
    wire = deadline.astimezone().isoformat()
    return [
        {"id": 1, "title": "buy milk", "description": "", "completed": False, "deadline": wire},
        {"id": 2, "title": "pay rent", "description": "", "completed": True, "deadline": wire},
        {"id": 3, "title": "call mom", "description": "", "completed": False, "deadline": None},
    ]


@pytest.fixture()
def gateway(server_items: list[dict]) -> FakeTodoGateway:
    return FakeTodoGateway(server_items)


@pytest.fixture()
def store(gateway: FakeTodoGateway) -> TaskStore:
    """Store with the three server records already loaded; call log reset."""
    s = TaskStore(gateway)
    assert s.load()
    gateway.calls.clear()
    return s


@pytest.fixture()
def cache(tmp_path: Path) -> JsonCache:
    return JsonCache(cache_dir=str(tmp_path / "cache"))
