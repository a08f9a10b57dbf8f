from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from core.exceptions import ConcurrencyError, NotFoundError
from core.models import Task
from infra.db.repositories import SqlAlchemyTaskRepository


def test_task_update_rejects_stale_expected_version(services):
    ts = services["task_service"]

    task = ts.create_task("Task A", "first", start_date=date(2026, 2, 24), duration_days=2, is_project=True)
    updated = ts.update_task(task.id, title="Task A v2")

    assert updated.version == 2
    with pytest.raises(ConcurrencyError):
        ts.update_task(task.id, title="stale", expected_version=1)


def test_repository_update_bumps_version_and_detects_stale_copies(session):
    repo = SqlAlchemyTaskRepository(session)
    task = Task.create("Design", "Draft the design", start_date=date(2026, 3, 1))
    repo.add(task)
    session.commit()

    stale = replace(task)
    task.title = "Design v2"
    repo.update(task)
    session.commit()

    assert task.version == 2
    assert repo.get(task.id).title == "Design v2"

    stale.title = "Design (stale)"
    with pytest.raises(ConcurrencyError) as exc:
        repo.update(stale)
    assert exc.value.code == "STALE_WRITE"


def test_repository_update_of_missing_row_is_not_found(session):
    repo = SqlAlchemyTaskRepository(session)

    with pytest.raises(NotFoundError) as exc:
        repo.update(Task.create("Ghost", "never stored"))
    assert exc.value.code == "TASK_NOT_FOUND"
