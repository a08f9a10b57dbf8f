from __future__ import annotations

import logging
from typing import Optional

from core.domain import BoundsWindow, Task
from core.interfaces import TaskLookup


logger = logging.getLogger(__name__)

MAX_ANCESTOR_HOPS = 20


class AncestorBoundsResolver:
    """
    Resolve the scheduling window a task inherits from its top-most ancestor.

    The walk follows ``parent_task_id`` one lookup at a time and stops when the
    current task has no parent, the parent cannot be found, a lookup fails, or
    ``max_hops`` lookups have been made. Cycles are not detected; the hop cap
    is what guarantees termination.
    """

    def __init__(self, lookup: TaskLookup, max_hops: int = MAX_ANCESTOR_HOPS):
        self._lookup = lookup
        self._max_hops = max_hops

    def resolve(self, task: Optional[Task]) -> BoundsWindow:
        if task is None:
            return BoundsWindow()
        return BoundsWindow.from_task(self._walk(task, hops=0))

    def resolve_for_parent(self, parent_task_id: Optional[str]) -> BoundsWindow:
        """Bounds for a task whose parent is ``parent_task_id``; the task itself is excluded."""
        if not parent_task_id or self._max_hops <= 0:
            return BoundsWindow()
        parent = self._fetch(parent_task_id, child_id=None)
        if parent is None:
            return BoundsWindow()
        return BoundsWindow.from_task(self._walk(parent, hops=1))

    def _fetch(self, task_id: str, child_id: Optional[str]) -> Optional[Task]:
        try:
            return self._lookup.get(task_id)
        except Exception as exc:
            logger.warning("Bounds lookup failed for task %s (child %s): %s", task_id, child_id, exc)
            return None

    def _walk(self, start: Task, hops: int) -> Task:
        current = start
        while current.parent_task_id and hops < self._max_hops:
            parent = self._fetch(current.parent_task_id, child_id=current.id)
            if parent is None:
                break
            current = parent
            hops += 1

        if current.parent_task_id and hops >= self._max_hops:
            logger.debug("Ancestor walk from task %s truncated after %s hops", start.id, hops)
        return current


__all__ = ["AncestorBoundsResolver", "MAX_ANCESTOR_HOPS"]
