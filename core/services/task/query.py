from __future__ import annotations

from typing import List, Optional

from core.interfaces import TaskRepository
from core.models import Task


class TaskQueryMixin:
    _task_repo: TaskRepository

    def get_task(self, task_id: str) -> Optional[Task]:
        if not task_id:
            return None
        return self._task_repo.get(task_id)

    def list_children(self, task_id: str) -> List[Task]:
        return self._task_repo.list_children(task_id)

    def list_projects(self) -> List[Task]:
        return self._task_repo.list_roots()

    def list_descendants(self, task_id: str) -> List[tuple[int, Task]]:
        """Every task below ``task_id`` in display order, paired with its depth (1 = child)."""
        rows: List[tuple[int, Task]] = []
        visited: set[str] = {task_id}
        stack = [(1, child) for child in reversed(self._sorted_children(task_id))]
        while stack:
            depth, task = stack.pop()
            if task.id in visited:
                continue
            visited.add(task.id)
            rows.append((depth, task))
            stack.extend((depth + 1, child) for child in reversed(self._sorted_children(task.id)))
        return rows

    def _sorted_children(self, task_id: str) -> List[Task]:
        return sorted(
            self._task_repo.list_children(task_id),
            key=lambda t: (t.start_date is None, t.start_date, t.title.lower()),
        )
