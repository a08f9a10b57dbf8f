from __future__ import annotations

from enum import Enum


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ScheduleField(str, Enum):
    """Which of the date/duration trio received the most recent direct edit."""

    NONE = "NONE"
    START = "START"
    END = "END"
    DURATION = "DURATION"


__all__ = ["TaskPriority", "ScheduleField"]
