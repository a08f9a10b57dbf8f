from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping, Optional

from core.domain.enums import ScheduleField, TaskPriority


@dataclass(frozen=True)
class BoundsWindow:
    """Inherited scheduling envelope; a missing side imposes no constraint."""

    start: Optional[date] = None
    end: Optional[date] = None

    @staticmethod
    def from_task(task) -> "BoundsWindow":
        if task is None:
            return BoundsWindow()
        return BoundsWindow(
            start=getattr(task, "start_date", None),
            end=getattr(task, "end_date", None),
        )

    @property
    def is_empty(self) -> bool:
        return self.start is None and self.end is None

    def contains(self, value: date | None) -> bool:
        if value is None:
            return True
        if self.start is not None and value < self.start:
            return False
        if self.end is not None and value > self.end:
            return False
        return True


@dataclass(frozen=True)
class ScheduleState:
    title: str = ""
    description: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    duration_days: int = 0
    priority: TaskPriority = TaskPriority.MEDIUM
    estimated_hours: float = 0.0
    last_changed: ScheduleField = ScheduleField.NONE
    field_errors: Mapping[str, str] = field(default_factory=dict)
    touched: frozenset[str] = frozenset()
    submit_attempted: bool = False

    def payload(self) -> dict:
        """Values handed to the persistence layer on submit."""
        return {
            "title": self.title.strip(),
            "description": self.description.strip(),
            "start_date": self.start_date,
            "end_date": self.end_date,
            "duration_days": self.duration_days,
            "priority": self.priority,
            "estimated_hours": self.estimated_hours,
        }


__all__ = ["BoundsWindow", "ScheduleState"]
