from __future__ import annotations

from datetime import datetime

from core.models import Task, TaskPriority
from infra.db.models import TaskNoteORM, TaskORM


def task_to_orm(task: Task) -> TaskORM:
    return TaskORM(
        id=task.id,
        parent_task_id=task.parent_task_id,
        title=task.title,
        description=task.description,
        start_date=task.start_date,
        end_date=task.end_date,
        duration_days=task.duration_days,
        priority=task.priority,
        estimated_hours=task.estimated_hours,
        is_project=task.is_project,
        version=getattr(task, "version", 1),
    )


def task_from_orm(obj: TaskORM) -> Task:
    return Task(
        id=obj.id,
        parent_task_id=obj.parent_task_id,
        title=obj.title,
        description=obj.description or "",
        start_date=obj.start_date,
        end_date=obj.end_date,
        duration_days=int(obj.duration_days or 0),
        priority=obj.priority or TaskPriority.MEDIUM,
        estimated_hours=float(obj.estimated_hours or 0.0),
        is_project=bool(obj.is_project),
        version=getattr(obj, "version", 1),
    )


def note_to_orm(task_id: str, body: str) -> TaskNoteORM:
    return TaskNoteORM(task_id=task_id, body=body, updated_at=datetime.now())


__all__ = [
    "task_to_orm",
    "task_from_orm",
    "note_to_orm",
]
