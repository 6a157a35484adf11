from __future__ import annotations

from collections.abc import Iterable

from todo_client.domain.models import FilterMode, Task


def filter_tasks(tasks: Iterable[Task], mode: FilterMode) -> list[Task]:
    """Visible subsequence of ``tasks`` for ``mode``, keeping relative order."""
    if mode == FilterMode.COMPLETED:
        return [task for task in tasks if task.completed]
    if mode == FilterMode.PENDING:
        return [task for task in tasks if not task.completed]
    return list(tasks)
