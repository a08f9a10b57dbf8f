import pytest

from core.events.domain_events import domain_events
from core.exceptions import ValidationError


def test_notes_round_trip_per_task(services):
    ts = services["task_service"]
    notes = services["note_service"]
    a = ts.create_task("Alpha", "first", is_project=True)
    b = ts.create_task("Bravo", "second", is_project=True)

    notes.save_note(a.id, "call the vendor")

    assert notes.get_note(a.id) == "call the vendor"
    assert notes.get_note(b.id) == ""


def test_saving_again_overwrites_and_blank_deletes(services):
    ts = services["task_service"]
    notes = services["note_service"]
    task = ts.create_task("Alpha", "first", is_project=True)

    notes.save_note(task.id, "v1")
    notes.save_note(task.id, "v2")
    assert notes.get_note(task.id) == "v2"

    notes.save_note(task.id, "   ")
    assert notes.get_note(task.id) == ""


def test_note_changes_are_announced(services):
    ts = services["task_service"]
    notes = services["note_service"]
    task = ts.create_task("Alpha", "first", is_project=True)
    seen: list[str] = []

    def _handler(task_id: str) -> None:
        seen.append(task_id)

    domain_events.notes_changed.connect(_handler)
    notes.save_note(task.id, "x")
    notes.delete_note(task.id)
    domain_events.notes_changed.disconnect(_handler)
    notes.save_note(task.id, "y")

    assert seen == [task.id, task.id]


def test_note_requires_task_id(services):
    with pytest.raises(ValidationError) as exc:
        services["note_service"].get_note("")
    assert exc.value.code == "NOTE_TASK_REQUIRED"
