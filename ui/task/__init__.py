from .actions import TaskFormActions
from .dialogs import TaskDetailDialog, TaskNotesDialog, TaskScheduleDialog

__all__ = [
    "TaskFormActions",
    "TaskScheduleDialog",
    "TaskNotesDialog",
    "TaskDetailDialog",
]
