from infra.db.task.mapper import note_to_orm, task_from_orm, task_to_orm
from infra.db.task.repository import SqlAlchemyTaskNoteRepository, SqlAlchemyTaskRepository

__all__ = [
    "task_to_orm",
    "task_from_orm",
    "note_to_orm",
    "SqlAlchemyTaskRepository",
    "SqlAlchemyTaskNoteRepository",
]
