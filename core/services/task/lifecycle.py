from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from sqlalchemy.orm import Session

from core.domain import BoundsWindow
from core.events.domain_events import domain_events
from core.exceptions import BusinessRuleError, ConcurrencyError, NotFoundError
from core.interfaces import TaskNoteRepository, TaskRepository
from core.models import Task, TaskPriority
from core.services.schedule.bounds import AncestorBoundsResolver
from core.services.schedule.rules import coerce_hours


logger = logging.getLogger(__name__)

UNSET: Any = object()


class TaskLifecycleMixin:
    _session: Session
    _task_repo: TaskRepository
    _note_repo: Optional[TaskNoteRepository]
    _bounds_resolver: AncestorBoundsResolver

    def bounds_for_parent(self, parent_task_id: Optional[str]) -> BoundsWindow:
        return self._bounds_resolver.resolve_for_parent(parent_task_id)

    def create_task(
        self,
        title: str,
        description: str = "",
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        duration_days: Optional[int] = None,
        priority: TaskPriority = TaskPriority.MEDIUM,
        estimated_hours: float = 0.0,
        parent_task_id: Optional[str] = None,
        is_project: bool = False,
    ) -> Task:
        self._validate_hierarchy(parent_task_id, is_project)
        if parent_task_id and self._task_repo.get(parent_task_id) is None:
            raise NotFoundError("Parent task not found.", code="PARENT_NOT_FOUND")

        start_date, end_date, duration = self._normalize_schedule(start_date, end_date, duration_days)
        task = Task.create(
            title=(title or "").strip(),
            description=(description or "").strip(),
            start_date=start_date,
            end_date=end_date,
            duration_days=duration,
            priority=TaskPriority(priority),
            estimated_hours=coerce_hours(estimated_hours),
            parent_task_id=parent_task_id,
            is_project=is_project,
        )
        self._validate_task_values(self._values_of(task), self.bounds_for_parent(parent_task_id))

        try:
            self._task_repo.add(task)
            self._session.commit()
        except Exception as exc:
            self._session.rollback()
            logger.error("Error creating task %r: %s", task.title, exc)
            raise

        logger.info("Created task %s - %s (parent %s)", task.id, task.title, parent_task_id)
        domain_events.tasks_changed.emit(task.id)
        return task

    def update_task(
        self,
        task_id: str,
        title: str | None = None,
        description: str | None = None,
        start_date: Any = UNSET,
        end_date: Any = UNSET,
        duration_days: int | None = None,
        priority: TaskPriority | None = None,
        estimated_hours: float | None = None,
        expected_version: int | None = None,
    ) -> Task:
        """
        Update a task. ``None`` leaves a field unchanged, except for the two
        dates, where ``None`` clears the date and omission leaves it alone.
        """
        task = self._task_repo.get(task_id)
        if not task:
            raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
        if expected_version is not None and task.version != expected_version:
            raise ConcurrencyError(
                "Task changed since you opened it. Refresh and try again.",
                code="STALE_WRITE",
            )

        if title is not None:
            task.title = title.strip()
        if description is not None:
            task.description = description.strip()
        if priority is not None:
            task.priority = TaskPriority(priority)
        if estimated_hours is not None:
            task.estimated_hours = coerce_hours(estimated_hours)

        new_start = task.start_date if start_date is UNSET else start_date
        new_end = task.end_date if end_date is UNSET else end_date
        new_duration = task.duration_days if duration_days is None else duration_days
        moved = start_date is not UNSET or duration_days is not None
        if moved and end_date is UNSET and new_duration:
            # Moving the start or changing the duration re-derives the end.
            new_end = None
        task.start_date, task.end_date, task.duration_days = self._normalize_schedule(
            new_start, new_end, new_duration
        )

        self._validate_task_values(self._values_of(task), self.bounds_for_parent(task.parent_task_id))

        try:
            self._task_repo.update(task)
            self._session.commit()
        except Exception as exc:
            self._session.rollback()
            logger.error("Error updating task %s: %s", task_id, exc)
            raise

        logger.info("Updated task %s - %s", task.id, task.title)
        domain_events.tasks_changed.emit(task.id)
        return task

    def delete_task(self, task_id: str) -> None:
        task = self._task_repo.get(task_id)
        if not task:
            raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")

        subtree = self._collect_subtree(task_id)
        try:
            # Children first so no row is left pointing at a deleted parent.
            for tid in reversed(subtree):
                if self._note_repo is not None:
                    self._note_repo.delete(tid)
                self._task_repo.delete(tid)
            self._session.commit()
        except Exception as exc:
            self._session.rollback()
            logger.error("Error deleting task %s: %s", task_id, exc)
            raise

        logger.info("Deleted task %s and %s subtask(s)", task_id, len(subtree) - 1)
        domain_events.tasks_changed.emit(task_id)

    def _collect_subtree(self, task_id: str) -> list[str]:
        ordered: list[str] = []
        visited: set[str] = set()
        stack = [task_id]
        while stack:
            cur = stack.pop()
            if cur in visited:
                continue
            visited.add(cur)
            ordered.append(cur)
            for child in self._task_repo.list_children(cur):
                if child.id == task_id:
                    raise BusinessRuleError(
                        "Task hierarchy contains a cycle.", code="TASK_HIERARCHY_CYCLE"
                    )
                if child.id not in visited:
                    stack.append(child.id)
        return ordered

    @staticmethod
    def _values_of(task: Task) -> dict[str, Any]:
        return {
            "title": task.title,
            "description": task.description,
            "start_date": task.start_date,
            "end_date": task.end_date,
            "duration_days": task.duration_days,
            "estimated_hours": task.estimated_hours,
        }
