"""Request and response shapes exchanged over the HTTP boundary.

Wire keys are camelCase (``isTaskOpen``, ``createdOn``); attributes are
snake_case.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from komplist.exceptions import BadRequestError
from komplist.models.task_model import Priority, Task


def _require_object(payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise BadRequestError("Request body must be a JSON object")
    return payload


def _parse_bool(payload: dict, key: str) -> Optional[bool]:
    value = payload.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise BadRequestError(f"Field '{key}' must be a boolean")


def _parse_description(payload: dict) -> Optional[str]:
    value = payload.get("description")
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise BadRequestError("Field 'description' must be a non-empty string")
    return value.strip()


def _parse_priority(payload: dict) -> Optional[Priority]:
    value = payload.get("priority")
    if value is None:
        return None
    if not isinstance(value, str) or value not in Priority.__members__:
        allowed = ", ".join(p.name for p in Priority)
        raise BadRequestError(f"Field 'priority' must be one of: {allowed}")
    return Priority[value]


def _parse_datetime(payload: dict, key: str) -> Optional[datetime]:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise BadRequestError(f"Field '{key}' must be an ISO-8601 string")
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise BadRequestError(f"Invalid {key} format") from None
    if parsed.tzinfo is not None:
        # Stored as naive local time
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


@dataclass(frozen=True)
class TaskCreateRequest:
    description: str
    priority: Priority
    is_reminder_set: bool = False
    is_task_open: bool = True
    created_on: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_json(cls, payload: Any) -> "TaskCreateRequest":
        payload = _require_object(payload)
        description = _parse_description(payload)
        if description is None:
            raise BadRequestError("Description is required")
        priority = _parse_priority(payload)
        if priority is None:
            raise BadRequestError("Priority is required")

        # Absent fields fall back to the dataclass defaults
        optional = {
            "is_reminder_set": _parse_bool(payload, "isReminderSet"),
            "is_task_open": _parse_bool(payload, "isTaskOpen"),
            "created_on": _parse_datetime(payload, "createdOn"),
        }
        kwargs = {name: value for name, value in optional.items() if value is not None}
        return cls(description=description, priority=priority, **kwargs)

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "isReminderSet": self.is_reminder_set,
            "isTaskOpen": self.is_task_open,
            "createdOn": self.created_on.isoformat(),
            "priority": self.priority.name,
        }


@dataclass(frozen=True)
class TaskUpdateRequest:
    """Partial update; ``None`` leaves the stored value untouched."""

    description: Optional[str] = None
    is_reminder_set: Optional[bool] = None
    is_task_open: Optional[bool] = None
    priority: Optional[Priority] = None

    @classmethod
    def from_json(cls, payload: Any) -> "TaskUpdateRequest":
        payload = _require_object(payload)
        return cls(
            description=_parse_description(payload),
            is_reminder_set=_parse_bool(payload, "isReminderSet"),
            is_task_open=_parse_bool(payload, "isTaskOpen"),
            priority=_parse_priority(payload),
        )

    def changes(self) -> Dict[str, Any]:
        """Attribute name -> new value for every field that was supplied."""
        values = {
            "description": self.description,
            "is_reminder_set": self.is_reminder_set,
            "is_task_open": self.is_task_open,
            "priority": self.priority,
        }
        return {name: value for name, value in values.items() if value is not None}

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "isReminderSet": self.is_reminder_set,
            "isTaskOpen": self.is_task_open,
            "priority": self.priority.name if self.priority else None,
        }


@dataclass(frozen=True)
class TaskDto:
    id: int
    description: str
    is_reminder_set: bool
    is_task_open: bool
    created_on: datetime
    priority: Priority

    @classmethod
    def from_task(cls, task: Task) -> "TaskDto":
        return cls(
            id=task.id,
            description=task.description,
            is_reminder_set=task.is_reminder_set,
            is_task_open=task.is_task_open,
            created_on=task.created_on,
            priority=task.priority,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "description": self.description,
            "isReminderSet": self.is_reminder_set,
            "isTaskOpen": self.is_task_open,
            "createdOn": self.created_on.isoformat(),
            "priority": self.priority.name,
        }
