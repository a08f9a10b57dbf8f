from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import TaskNoteRepository, TaskRepository
from core.models import Task
from infra.db.models import TaskNoteORM, TaskORM
from infra.db.optimistic import update_with_version_check
from infra.db.task.mapper import note_to_orm, task_from_orm, task_to_orm


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, task: Task) -> None:
        self.session.add(task_to_orm(task))

    def update(self, task: Task) -> None:
        task.version = update_with_version_check(
            self.session,
            TaskORM,
            task.id,
            getattr(task, "version", 1),
            {
                "title": task.title,
                "description": task.description,
                "start_date": task.start_date,
                "end_date": task.end_date,
                "duration_days": task.duration_days,
                "priority": task.priority,
                "estimated_hours": task.estimated_hours,
                "is_project": task.is_project,
                "parent_task_id": task.parent_task_id,
            },
        )

    def delete(self, task_id: str) -> None:
        self.session.query(TaskORM).filter_by(id=task_id).delete()

    def get(self, task_id: str) -> Optional[Task]:
        obj = self.session.get(TaskORM, task_id)
        return task_from_orm(obj) if obj else None

    def list_children(self, parent_task_id: str) -> List[Task]:
        stmt = select(TaskORM).where(TaskORM.parent_task_id == parent_task_id)
        rows = self.session.execute(stmt).scalars().all()
        return [task_from_orm(row) for row in rows]

    def list_roots(self) -> List[Task]:
        stmt = select(TaskORM).where(TaskORM.parent_task_id.is_(None)).order_by(TaskORM.title)
        rows = self.session.execute(stmt).scalars().all()
        return [task_from_orm(row) for row in rows]


class SqlAlchemyTaskNoteRepository(TaskNoteRepository):
    def __init__(self, session: Session):
        self.session = session

    def get(self, task_id: str) -> Optional[str]:
        obj = self.session.get(TaskNoteORM, task_id)
        return obj.body if obj else None

    def put(self, task_id: str, body: str) -> None:
        obj = self.session.get(TaskNoteORM, task_id)
        if obj is None:
            self.session.add(note_to_orm(task_id, body))
            return
        obj.body = body
        obj.updated_at = datetime.now()

    def delete(self, task_id: str) -> None:
        self.session.query(TaskNoteORM).filter_by(task_id=task_id).delete()


__all__ = [
    "SqlAlchemyTaskRepository",
    "SqlAlchemyTaskNoteRepository",
]
