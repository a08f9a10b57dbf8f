from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import ValidationError
from core.interfaces import TaskNoteRepository


logger = logging.getLogger(__name__)


class TaskNoteService:
    """Free-text notes keyed by task id."""

    def __init__(self, session: Session, note_repo: TaskNoteRepository):
        self._session = session
        self._note_repo = note_repo

    def get_note(self, task_id: str) -> str:
        self._require_task_id(task_id)
        return self._note_repo.get(task_id) or ""

    def save_note(self, task_id: str, text: str) -> None:
        self._require_task_id(task_id)
        body = text or ""
        try:
            if body.strip():
                self._note_repo.put(task_id, body)
            else:
                self._note_repo.delete(task_id)
            self._session.commit()
        except Exception as exc:
            self._session.rollback()
            logger.error("Error saving note for task %s: %s", task_id, exc)
            raise
        domain_events.notes_changed.emit(task_id)

    def delete_note(self, task_id: str) -> None:
        self.save_note(task_id, "")

    @staticmethod
    def _require_task_id(task_id: str) -> None:
        if not (task_id or "").strip():
            raise ValidationError("Task id is required for notes.", code="NOTE_TASK_REQUIRED")
