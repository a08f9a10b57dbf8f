from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from core.domain import BoundsWindow
from core.exceptions import DomainError, NotFoundError
from core.models import Task
from core.services.schedule.bounds import AncestorBoundsResolver
from core.services.schedule.engine import ScheduleConsistencyEngine
from core.services.task.service import TaskService


logger = logging.getLogger(__name__)


@dataclass
class TaskFormSession:
    """One open create/edit form. Discarding it needs no cleanup."""

    engine: ScheduleConsistencyEngine
    task_id: Optional[str] = None
    parent_task_id: Optional[str] = None
    is_project: bool = False
    expected_version: Optional[int] = None
    form_error: str = ""
    saved_task: Optional[Task] = field(default=None, repr=False)

    @property
    def is_edit(self) -> bool:
        return self.task_id is not None

    @property
    def bounds(self) -> BoundsWindow:
        return self.engine.bounds


class TaskFormService:
    """Opens task forms seeded with inherited bounds and forwards valid submits."""

    def __init__(self, task_service: TaskService, bounds_resolver: AncestorBoundsResolver | None = None):
        self._task_service = task_service
        self._bounds_resolver = bounds_resolver or task_service.bounds_resolver

    def open_create(self, parent_task_id: Optional[str] = None, is_project: bool = False) -> TaskFormSession:
        bounds = self._bounds_resolver.resolve_for_parent(parent_task_id)
        logger.debug("Opening create form (parent %s) with bounds %s", parent_task_id, bounds)
        return TaskFormSession(
            engine=ScheduleConsistencyEngine(task=None, bounds=bounds),
            parent_task_id=parent_task_id,
            is_project=is_project,
        )

    def open_edit(self, task_id: str) -> TaskFormSession:
        task = self._task_service.get_task(task_id)
        if task is None:
            raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
        bounds = self._bounds_resolver.resolve_for_parent(task.parent_task_id)
        logger.debug("Opening edit form for task %s with bounds %s", task_id, bounds)
        return TaskFormSession(
            engine=ScheduleConsistencyEngine(task=task, bounds=bounds),
            task_id=task.id,
            parent_task_id=task.parent_task_id,
            is_project=task.is_project,
            expected_version=task.version,
        )

    def submit(self, session: TaskFormSession) -> Optional[Task]:
        errors = session.engine.validate_all()
        if any(errors.values()):
            return None

        payload = session.engine.snapshot().payload()
        try:
            if session.is_edit:
                task = self._task_service.update_task(
                    session.task_id,
                    expected_version=session.expected_version,
                    **payload,
                )
            else:
                task = self._task_service.create_task(
                    parent_task_id=session.parent_task_id,
                    is_project=session.is_project,
                    **payload,
                )
        except DomainError as exc:
            logger.warning("Task form submit rejected: %s (%s)", exc, exc.code)
            session.form_error = str(exc)
            return None
        except Exception as exc:
            logger.exception("Task form submit failed")
            session.form_error = str(exc)
            return None

        session.form_error = ""
        session.saved_task = task
        session.task_id = task.id
        session.expected_version = task.version
        return task


__all__ = ["TaskFormSession", "TaskFormService"]
