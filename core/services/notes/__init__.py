from core.services.notes.service import TaskNoteService

__all__ = ["TaskNoteService"]
