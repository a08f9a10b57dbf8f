from __future__ import annotations

from typing import List, Optional, Protocol

from core.domain import Task


class TaskLookup(Protocol):
    """Read-only lookup; absence is a normal result, not an error."""

    def get(self, task_id: str) -> Optional[Task]: ...


class TaskRepository(TaskLookup, Protocol):
    def add(self, task: Task) -> None: ...

    def update(self, task: Task) -> None: ...

    def delete(self, task_id: str) -> None: ...

    def list_children(self, parent_task_id: str) -> List[Task]: ...

    def list_roots(self) -> List[Task]: ...


class TaskNoteRepository(Protocol):
    def get(self, task_id: str) -> Optional[str]: ...

    def put(self, task_id: str, body: str) -> None: ...

    def delete(self, task_id: str) -> None: ...


__all__ = ["TaskLookup", "TaskRepository", "TaskNoteRepository"]
