from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from core.services.notes import TaskNoteService
from core.services.schedule import AncestorBoundsResolver
from core.services.task import TaskFormService, TaskService
from infra.db.repositories import SqlAlchemyTaskNoteRepository, SqlAlchemyTaskRepository


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    task_service: TaskService
    task_form_service: TaskFormService
    note_service: TaskNoteService
    bounds_resolver: AncestorBoundsResolver

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "task_service": self.task_service,
            "task_form_service": self.task_form_service,
            "note_service": self.note_service,
            "bounds_resolver": self.bounds_resolver,
        }


def build_service_graph(session: Session) -> ServiceGraph:
    task_repo = SqlAlchemyTaskRepository(session)
    note_repo = SqlAlchemyTaskNoteRepository(session)

    bounds_resolver = AncestorBoundsResolver(task_repo)
    task_service = TaskService(
        session,
        task_repo,
        note_repo=note_repo,
        bounds_resolver=bounds_resolver,
    )
    task_form_service = TaskFormService(task_service, bounds_resolver)
    note_service = TaskNoteService(session, note_repo)

    return ServiceGraph(
        session=session,
        task_service=task_service,
        task_form_service=task_form_service,
        note_service=note_service,
        bounds_resolver=bounds_resolver,
    )


def build_service_dict(session: Session) -> dict[str, Any]:
    return build_service_graph(session).as_dict()


__all__ = ["ServiceGraph", "build_service_graph", "build_service_dict"]
