from __future__ import annotations

from core.domain import (
    BoundsWindow,
    ScheduleField,
    ScheduleState,
    Task,
    TaskPriority,
    generate_id,
)

__all__ = [
    "generate_id",
    "TaskPriority",
    "ScheduleField",
    "Task",
    "BoundsWindow",
    "ScheduleState",
]
