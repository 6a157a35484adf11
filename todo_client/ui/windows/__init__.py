"""UI window modules."""

from todo_client.ui.windows.main_window_constants import (
    APP_TITLE,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    HELP_TEXT,
    MAX_WINDOW_HEIGHT,
    MAX_WINDOW_WIDTH,
    MIN_WINDOW_HEIGHT,
    MIN_WINDOW_WIDTH,
    SEPARATE_TIME_STEP,
)
from todo_client.ui.windows.main_window_state_store import MainWindowState, MainWindowStateStore

__all__ = [
    "APP_TITLE",
    "DEFAULT_WINDOW_HEIGHT",
    "DEFAULT_WINDOW_WIDTH",
    "HELP_TEXT",
    "MAX_WINDOW_HEIGHT",
    "MAX_WINDOW_WIDTH",
    "MIN_WINDOW_HEIGHT",
    "MIN_WINDOW_WIDTH",
    "SEPARATE_TIME_STEP",
    "MainWindowState",
    "MainWindowStateStore",
]
