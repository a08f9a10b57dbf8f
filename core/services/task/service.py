from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from core.interfaces import TaskNoteRepository, TaskRepository
from core.services.schedule.bounds import MAX_ANCESTOR_HOPS, AncestorBoundsResolver
from core.services.task.lifecycle import TaskLifecycleMixin
from core.services.task.query import TaskQueryMixin
from core.services.task.validation import TaskValidationMixin


class TaskService(
    TaskLifecycleMixin,
    TaskQueryMixin,
    TaskValidationMixin,
):
    def __init__(
        self,
        session: Session,
        task_repo: TaskRepository,
        note_repo: TaskNoteRepository | None = None,
        bounds_resolver: Optional[AncestorBoundsResolver] = None,
        max_ancestor_hops: int = MAX_ANCESTOR_HOPS,
    ):
        self._session: Session = session
        self._task_repo: TaskRepository = task_repo
        self._note_repo: TaskNoteRepository | None = note_repo
        self._bounds_resolver: AncestorBoundsResolver = bounds_resolver or AncestorBoundsResolver(
            task_repo, max_hops=max_ancestor_hops
        )

    @property
    def bounds_resolver(self) -> AncestorBoundsResolver:
        return self._bounds_resolver
