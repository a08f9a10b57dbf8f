from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional
from uuid import uuid4

from core.domain.enums import TaskPriority


def generate_id() -> str:
    return str(uuid4())


@dataclass
class Task:
    """A schedulable unit of work; ``parent_task_id`` links it into a project tree."""

    id: str
    title: str
    description: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    duration_days: int = 0
    priority: TaskPriority = TaskPriority.MEDIUM
    estimated_hours: float = 0.0
    parent_task_id: Optional[str] = None
    is_project: bool = False
    version: int = 1

    @staticmethod
    def create(title: str, description: str = "", **extra) -> "Task":
        return Task(id=generate_id(), title=title, description=description, **extra)


__all__ = ["Task", "generate_id"]
