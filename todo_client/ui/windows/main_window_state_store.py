"""Persistent UI preferences for MainWindow."""

from __future__ import annotations

from dataclasses import dataclass

from todo_client.domain.models import FilterMode
from todo_client.infrastructure.cache.json_cache import JsonCache
from todo_client.ui.windows.main_window_constants import (
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    MAX_WINDOW_HEIGHT,
    MAX_WINDOW_WIDTH,
    MIN_WINDOW_HEIGHT,
    MIN_WINDOW_WIDTH,
)


def _clamp(value, low: int, high: int, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        number = default
    return max(low, min(high, number))


@dataclass(slots=True)
class MainWindowState:
    width: int = DEFAULT_WINDOW_WIDTH
    height: int = DEFAULT_WINDOW_HEIGHT
    dark_mode: bool = False
    filter_mode: FilterMode = FilterMode.ALL


class MainWindowStateStore:
    """Load/save window size, theme and filter via JSON cache."""

    def __init__(self, cache: JsonCache | None = None):
        self._cache = cache or JsonCache()

    def load(self) -> MainWindowState:
        wrapper = self._cache.load("ui_state")
        if not isinstance(wrapper, dict):
            return MainWindowState()

        payload = wrapper.get("payload")
        if not isinstance(payload, dict):
            return MainWindowState()

        try:
            filter_mode = FilterMode(payload.get("filter_mode", FilterMode.ALL.value))
        except ValueError:
            filter_mode = FilterMode.ALL

        return MainWindowState(
            width=_clamp(payload.get("width"), MIN_WINDOW_WIDTH, MAX_WINDOW_WIDTH, DEFAULT_WINDOW_WIDTH),
            height=_clamp(payload.get("height"), MIN_WINDOW_HEIGHT, MAX_WINDOW_HEIGHT, DEFAULT_WINDOW_HEIGHT),
            dark_mode=bool(payload.get("dark_mode", False)),
            filter_mode=filter_mode,
        )

    def save(self, state: MainWindowState) -> None:
        self._cache.save(
            "ui_state",
            {
                "width": _clamp(state.width, MIN_WINDOW_WIDTH, MAX_WINDOW_WIDTH, DEFAULT_WINDOW_WIDTH),
                "height": _clamp(state.height, MIN_WINDOW_HEIGHT, MAX_WINDOW_HEIGHT, DEFAULT_WINDOW_HEIGHT),
                "dark_mode": bool(state.dark_mode),
                "filter_mode": FilterMode(state.filter_mode).value,
            },
        )
