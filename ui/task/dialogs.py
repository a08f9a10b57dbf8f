"""Task dialog facade.

Keep external imports stable while dialog implementations live in bounded
modules (`schedule_dialog`, `notes_dialog`, `detail_dialog`).
"""

from .detail_dialog import TaskDetailDialog
from .notes_dialog import TaskNotesDialog
from .schedule_dialog import TaskScheduleDialog

__all__ = [
    "TaskScheduleDialog",
    "TaskNotesDialog",
    "TaskDetailDialog",
]
