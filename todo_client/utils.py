from __future__ import annotations

import os
import sys
from datetime import datetime


def get_base_path() -> str:
    """
    Return the directory holding runtime data.

    Returns:
        str: the executable's directory when frozen, otherwise the project root
    """
    if getattr(sys, 'frozen', False):
        return os.path.dirname(sys.executable)
    else:
        # todo_client/utils.py -> project root is two levels up
        return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def format_deadline_label(value: datetime | None) -> str:
    if value is None:
        return "No deadline"
    return value.strftime("%Y-%m-%d %H:%M")
