"""
FILE: todolist/core/models.py
PURPOSE: Domain models for tasks, priorities, and list filters
EXPORTS:
  - Priority (enum)
  - FilterType (enum)
  - Task (frozen dataclass)
DEPENDENCIES:
  - dataclasses (stdlib)
  - enum (stdlib)
  - json (stdlib)
  - todolist.core.exceptions (InvalidInputError)
NOTES:
  - Task is immutable; toggled() returns a new instance (copy-on-write)
  - All models have to_json() for serialization
  - parse() helpers accept user-typed text from the REPL and CLI
"""

from dataclasses import dataclass, asdict, replace
from enum import Enum
from typing import Any, Dict
import json

from .exceptions import InvalidInputError


class Priority(Enum):
    """Task priority level."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @classmethod
    def parse(cls, text: str) -> "Priority":
        """
        Parse priority from user input.

        Accepts the level name in any case, or its first letter (l/m/h).

        Raises:
            InvalidInputError: If text doesn't name a priority
        """
        value = (text or "").strip().upper()
        for priority in cls:
            if value in (priority.value, priority.value[0]):
                return priority
        raise InvalidInputError(
            f"Invalid priority '{text}'. Must be one of: low, medium, high"
        )


class FilterType(Enum):
    """Which subset of tasks is shown."""

    ALL = "ALL"
    HIGH_PRIORITY = "HIGH_PRIORITY"
    COMPLETED = "COMPLETED"

    @property
    def label(self) -> str:
        """Short name used in prompts and completions."""
        return _FILTER_LABELS[self]

    @classmethod
    def parse(cls, text: str) -> "FilterType":
        """
        Parse filter from user input.

        Accepts enum names (HIGH_PRIORITY) or short aliases (high, completed, done).

        Raises:
            InvalidInputError: If text doesn't name a filter
        """
        value = (text or "").strip().lower().replace("-", "_")
        for filter_type in cls:
            if value == filter_type.value.lower():
                return filter_type
        if value in _FILTER_ALIASES:
            return _FILTER_ALIASES[value]
        raise InvalidInputError(
            f"Invalid filter '{text}'. Must be one of: all, high, completed"
        )


_FILTER_LABELS = {
    FilterType.ALL: "all",
    FilterType.HIGH_PRIORITY: "high",
    FilterType.COMPLETED: "completed",
}

_FILTER_ALIASES = {
    "high": FilterType.HIGH_PRIORITY,
    "done": FilterType.COMPLETED,
}


@dataclass(frozen=True)
class Task:
    """A to-do item with name, description, due date, and priority."""

    id: int
    name: str
    description: str = ""
    due_date: str = ""
    priority: Priority = Priority.MEDIUM
    is_completed: bool = False

    def toggled(self) -> "Task":
        """Return a copy with is_completed negated."""
        return replace(self, is_completed=not self.is_completed)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """Build a Task from a plain dict (seed data, JSON)."""
        priority = data.get("priority", Priority.MEDIUM)
        if not isinstance(priority, Priority):
            priority = Priority.parse(priority)
        return cls(
            id=int(data["id"]),
            name=data.get("name", ""),
            description=data.get("description", ""),
            due_date=data.get("due_date", ""),
            priority=priority,
            is_completed=bool(data.get("is_completed", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        data = asdict(self)
        data["priority"] = self.priority.value
        return data

    def to_json(self) -> str:
        """Serialize task to JSON string."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
