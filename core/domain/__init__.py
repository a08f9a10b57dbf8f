from core.domain.enums import ScheduleField, TaskPriority
from core.domain.schedule import BoundsWindow, ScheduleState
from core.domain.task import Task, generate_id

__all__ = [
    "generate_id",
    "TaskPriority",
    "ScheduleField",
    "Task",
    "BoundsWindow",
    "ScheduleState",
]
