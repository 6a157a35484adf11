"""Constants used by the main window."""

from __future__ import annotations

APP_TITLE = "To-Do List"
DEFAULT_WINDOW_WIDTH = 420
DEFAULT_WINDOW_HEIGHT = 720
MIN_WINDOW_WIDTH = 340
MAX_WINDOW_WIDTH = 900
MIN_WINDOW_HEIGHT = 480
MAX_WINDOW_HEIGHT = 1600

# Desktop pickers show the date and the time as separate steps.
SEPARATE_TIME_STEP = True

HELP_TEXT = """
<b>Adding a task</b><br>
Type a title, pick a deadline with the calendar button, then press <i>Add Task</i>.<br><br>
<b>Completing a task</b><br>
Click a task's title to mark it done; click again to reopen it.<br><br>
<b>Editing and deleting</b><br>
Use <i>Edit</i> to change title, deadline or status, <i>Delete</i> to remove it.<br><br>
<b>Filters</b><br>
<i>All</i>, <i>Completed</i> and <i>Pending</i> narrow down the list.<br><br>
<b>Dark mode</b><br>
The switch in the header changes the theme; your choice is remembered.
"""
