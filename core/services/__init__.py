from .notes import TaskNoteService
from .schedule import AncestorBoundsResolver, ScheduleConsistencyEngine
from .task import TaskFormService, TaskFormSession, TaskService

__all__ = [
    "TaskService",
    "TaskFormService",
    "TaskFormSession",
    "TaskNoteService",
    "AncestorBoundsResolver",
    "ScheduleConsistencyEngine",
]
