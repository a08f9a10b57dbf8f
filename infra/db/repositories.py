# infra/db/repositories.py
"""Repository facade; implementations live in bounded modules under infra/db."""
from __future__ import annotations

from infra.db.task.repository import SqlAlchemyTaskNoteRepository, SqlAlchemyTaskRepository

__all__ = [
    "SqlAlchemyTaskRepository",
    "SqlAlchemyTaskNoteRepository",
]
