from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Union

TaskId = Union[str, int]

_WIRE_FIELDS = ("id", "title", "description", "completed", "deadline")


class FilterMode(str, Enum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"


class SessionMode(str, Enum):
    IDLE = "idle"
    CREATING = "creating"
    EDITING = "editing"


class PickerStage(str, Enum):
    CLOSED = "closed"
    AWAITING_DATE = "awaiting_date"
    AWAITING_TIME = "awaiting_time"


def parse_deadline(value: str | None) -> datetime | None:
    """Parse an ISO-8601 wire timestamp into a naive local datetime."""
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed
    return parsed.astimezone().replace(tzinfo=None)


def format_deadline(value: datetime | None) -> str | None:
    """Serialize a naive local datetime as a UTC ISO-8601 string (``...000Z``)."""
    if value is None:
        return None
    utc_value = value.astimezone(timezone.utc)
    return utc_value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class Task:
    id: TaskId
    title: str
    description: str = ""
    completed: bool = False
    deadline: datetime | None = None
    # Wire deadline kept verbatim when it could not be parsed.
    raw_deadline: str | None = field(default=None, compare=False)
    # Server fields this client does not interpret; echoed back on update.
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def is_overdue(self) -> bool:
        if self.deadline is None or self.completed:
            return False
        return self.deadline < datetime.now()

    @classmethod
    def from_wire(cls, item: dict) -> Task:
        wire_deadline = item.get("deadline")
        deadline = parse_deadline(wire_deadline)
        return cls(
            id=item["id"],
            title=item.get("title", ""),
            description=item.get("description") or "",
            completed=bool(item.get("completed", False)),
            deadline=deadline,
            raw_deadline=wire_deadline if deadline is None and wire_deadline else None,
            extra={key: value for key, value in item.items() if key not in _WIRE_FIELDS},
        )

    def to_wire(self) -> dict:
        body = dict(self.extra)
        body.update(
            {
                "id": self.id,
                "title": self.title,
                "description": self.description,
                "completed": self.completed,
                "deadline": format_deadline(self.deadline) if self.deadline is not None else self.raw_deadline,
            }
        )
        return body
