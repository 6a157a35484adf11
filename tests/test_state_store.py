# tests/test_state_store.py

from __future__ import annotations

from todo_client.domain.models import FilterMode
from todo_client.infrastructure.cache.json_cache import JsonCache
from todo_client.ui.windows.main_window_constants import (
    DEFAULT_WINDOW_WIDTH,
    MAX_WINDOW_WIDTH,
    MIN_WINDOW_HEIGHT,
)
from todo_client.ui.windows.main_window_state_store import MainWindowState, MainWindowStateStore


def test_missing_cache_gives_defaults(cache: JsonCache) -> None:
    state = MainWindowStateStore(cache).load()
    assert state == MainWindowState()


def test_save_then_load_restores_preferences(cache: JsonCache) -> None:
    store = MainWindowStateStore(cache)
    store.save(MainWindowState(width=500, height=800, dark_mode=True, filter_mode=FilterMode.PENDING))

    state = store.load()
    assert state.dark_mode is True
    assert state.filter_mode == FilterMode.PENDING
    assert (state.width, state.height) == (500, 800)


def test_corrupt_values_are_clamped_or_defaulted(cache: JsonCache) -> None:
    cache.save("ui_state", {"width": 99999, "height": 1, "filter_mode": "weird", "dark_mode": 0})

    state = MainWindowStateStore(cache).load()
    assert state.width == MAX_WINDOW_WIDTH
    assert state.height == MIN_WINDOW_HEIGHT
    assert state.filter_mode == FilterMode.ALL
    assert state.dark_mode is False


def test_unreadable_file_falls_back_to_defaults(cache: JsonCache) -> None:
    with open(cache._path("ui_state"), "w", encoding="utf-8") as file:
        file.write("{not json")

    assert MainWindowStateStore(cache).load().width == DEFAULT_WINDOW_WIDTH
