from datetime import date

import pytest

from core.exceptions import BusinessRuleError, ConcurrencyError, NotFoundError, ValidationError
from core.models import TaskPriority


def _project(ts, **extra):
    return ts.create_task(
        "Website relaunch",
        "Relaunch the public site",
        start_date=extra.pop("start_date", date(2024, 1, 1)),
        end_date=extra.pop("end_date", date(2024, 12, 31)),
        is_project=True,
        **extra,
    )


def test_create_task_derives_end_date_from_duration(services):
    ts = services["task_service"]
    project = _project(ts)

    task = ts.create_task(
        "Wireframes",
        "Low fidelity wireframes",
        start_date=date(2024, 3, 1),
        duration_days=5,
        parent_task_id=project.id,
    )

    stored = ts.get_task(task.id)
    assert stored.end_date == date(2024, 3, 6)
    assert stored.duration_days == 5
    assert stored.parent_task_id == project.id
    assert stored.priority == TaskPriority.MEDIUM


def test_create_task_derives_duration_from_dates(services):
    ts = services["task_service"]
    task = ts.create_task(
        "Audit",
        "Content audit",
        start_date=date(2024, 2, 1),
        end_date=date(2024, 2, 15),
        is_project=True,
    )
    assert task.duration_days == 14


def test_create_task_rejects_dates_outside_project_window(services):
    ts = services["task_service"]
    project = _project(ts)

    with pytest.raises(ValidationError) as exc_start:
        ts.create_task("Too late", "x", start_date=date(2025, 1, 1), parent_task_id=project.id)
    assert exc_start.value.code == "TASK_INVALID_DATE"
    assert exc_start.value.field == "start_date"

    with pytest.raises(ValidationError) as exc_end:
        ts.create_task(
            "Overrun",
            "x",
            start_date=date(2024, 12, 20),
            duration_days=30,
            parent_task_id=project.id,
        )
    assert exc_end.value.code == "TASK_INVALID_DATE"
    assert exc_end.value.field == "end_date"


def test_nested_task_is_bounded_by_top_most_ancestor(services):
    ts = services["task_service"]
    project = _project(ts)
    phase = ts.create_task(
        "Phase 1",
        "First phase",
        start_date=date(2024, 2, 1),
        end_date=date(2024, 2, 28),
        parent_task_id=project.id,
    )

    # Outside the phase but inside the project: the project window governs.
    task = ts.create_task(
        "Kickoff",
        "Kickoff meeting",
        start_date=date(2024, 6, 1),
        parent_task_id=phase.id,
    )
    assert task.id


def test_create_task_validation_codes(services):
    ts = services["task_service"]

    with pytest.raises(ValidationError) as exc_title:
        ts.create_task("   ", "desc")
    assert exc_title.value.code == "TASK_TITLE_EMPTY"

    with pytest.raises(ValidationError) as exc_desc:
        ts.create_task("Title", "")
    assert exc_desc.value.code == "TASK_DESCRIPTION_EMPTY"

    with pytest.raises(ValidationError) as exc_order:
        ts.create_task("Title", "desc", start_date=date(2024, 3, 5), end_date=date(2024, 3, 1))
    assert exc_order.value.code == "TASK_DATE_ORDER"

    with pytest.raises(ValidationError) as exc_duration:
        ts.create_task("Title", "desc", duration_days=-1)
    assert exc_duration.value.code == "TASK_NEGATIVE_DURATION"


def test_create_task_with_missing_parent_raises_not_found(services):
    ts = services["task_service"]
    with pytest.raises(NotFoundError) as exc:
        ts.create_task("Child", "desc", parent_task_id="nope")
    assert exc.value.code == "PARENT_NOT_FOUND"


def test_project_cannot_have_parent(services):
    ts = services["task_service"]
    project = _project(ts)
    with pytest.raises(BusinessRuleError) as exc:
        ts.create_task("Nested project", "desc", parent_task_id=project.id, is_project=True)
    assert exc.value.code == "PROJECT_HAS_PARENT"


def test_update_task_moves_end_with_start_and_bumps_version(services):
    ts = services["task_service"]
    project = _project(ts)
    task = ts.create_task(
        "Build",
        "Build it",
        start_date=date(2024, 3, 1),
        duration_days=3,
        parent_task_id=project.id,
    )

    updated = ts.update_task(task.id, start_date=date(2024, 4, 1))

    assert updated.end_date == date(2024, 4, 4)
    assert updated.version == 2
    assert ts.get_task(task.id).end_date == date(2024, 4, 4)


def test_update_task_can_clear_dates(services):
    ts = services["task_service"]
    task = ts.create_task("Idea", "Someday", start_date=date(2024, 3, 1), duration_days=2)

    updated = ts.update_task(task.id, start_date=None, end_date=None)

    assert updated.start_date is None
    assert updated.end_date is None


def test_update_task_rejects_stale_expected_version(services):
    ts = services["task_service"]
    task = ts.create_task("Task A", "desc", start_date=date(2026, 2, 24), duration_days=2)
    updated = ts.update_task(task.id, title="Task A v2")

    assert updated.version == 2
    with pytest.raises(ConcurrencyError):
        ts.update_task(task.id, title="stale", expected_version=1)


def test_update_task_enforces_parent_bounds(services):
    ts = services["task_service"]
    project = _project(ts)
    task = ts.create_task("Build", "desc", start_date=date(2024, 3, 1), parent_task_id=project.id)

    with pytest.raises(ValidationError) as exc:
        ts.update_task(task.id, start_date=date(2023, 12, 1))
    assert exc.value.code == "TASK_INVALID_DATE"
    assert ts.get_task(task.id).start_date == date(2024, 3, 1)


def test_update_missing_task_raises_not_found(services):
    with pytest.raises(NotFoundError):
        services["task_service"].update_task("missing", title="x")


def test_delete_task_removes_subtree_and_notes(services):
    ts = services["task_service"]
    notes = services["note_service"]
    project = _project(ts)
    phase = ts.create_task("Phase", "desc", parent_task_id=project.id)
    leaf = ts.create_task("Leaf", "desc", parent_task_id=phase.id)
    other = ts.create_task("Other", "desc", parent_task_id=project.id)
    notes.save_note(leaf.id, "remember the milk")

    ts.delete_task(phase.id)

    assert ts.get_task(phase.id) is None
    assert ts.get_task(leaf.id) is None
    assert notes.get_note(leaf.id) == ""
    assert [t.id for t in ts.list_children(project.id)] == [other.id]


def test_list_projects_returns_roots_only(services):
    ts = services["task_service"]
    project = _project(ts)
    ts.create_task("Child", "desc", parent_task_id=project.id)

    assert [t.id for t in ts.list_projects()] == [project.id]


def test_get_task_returns_none_for_unknown_id(services):
    assert services["task_service"].get_task("unknown") is None
    assert services["task_service"].get_task("") is None


def test_overlong_durations_are_rejected_as_validation_errors(services):
    ts = services["task_service"]

    with pytest.raises(ValidationError) as exc_long:
        ts.create_task("Title", "desc", start_date=date(2024, 3, 1), duration_days=10**7)
    assert exc_long.value.code == "TASK_DURATION_TOO_LONG"
    assert exc_long.value.field == "duration_days"

    with pytest.raises(ValidationError) as exc_span:
        ts.create_task("Title", "desc", start_date=date(1900, 1, 1), end_date=date(2100, 1, 1))
    assert exc_span.value.code == "TASK_DURATION_TOO_LONG"

    with pytest.raises(ValidationError) as exc_range:
        ts.create_task("Title", "desc", start_date=date(9999, 6, 1), duration_days=365)
    assert exc_range.value.code == "TASK_INVALID_DATE"
    assert exc_range.value.field == "end_date"

    task = ts.create_task("Title", "desc", start_date=date(2024, 3, 1), duration_days=2)
    with pytest.raises(ValidationError):
        ts.update_task(task.id, duration_days=10**7)
    assert ts.get_task(task.id).duration_days == 2


def test_list_descendants_walks_the_whole_tree_in_date_order(services):
    ts = services["task_service"]
    project = ts.create_task(
        "Launch", "Product launch", start_date=date(2024, 1, 1), end_date=date(2024, 12, 31), is_project=True
    )
    late = ts.create_task("Late phase", "second", start_date=date(2024, 6, 1), parent_task_id=project.id)
    early = ts.create_task("Early phase", "first", start_date=date(2024, 2, 1), parent_task_id=project.id)
    leaf = ts.create_task("Leaf", "grandchild", start_date=date(2024, 2, 10), parent_task_id=early.id)

    rows = ts.list_descendants(project.id)

    assert [(depth, task.id) for depth, task in rows] == [
        (1, early.id),
        (2, leaf.id),
        (1, late.id),
    ]
    assert ts.list_descendants(leaf.id) == []


def test_update_task_duration_only_moves_end(services):
    ts = services["task_service"]
    task = ts.create_task("Title", "desc", start_date=date(2024, 3, 1), duration_days=2)

    updated = ts.update_task(task.id, duration_days=7)

    assert updated.start_date == date(2024, 3, 1)
    assert updated.end_date == date(2024, 3, 8)
    assert updated.duration_days == 7
