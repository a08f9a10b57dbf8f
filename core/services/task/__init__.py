from core.services.task.form import TaskFormService, TaskFormSession
from core.services.task.service import TaskService

__all__ = ["TaskService", "TaskFormService", "TaskFormSession"]
