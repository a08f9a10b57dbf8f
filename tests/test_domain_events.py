from datetime import date

from core.events.domain_events import domain_events


def test_task_lifecycle_emits_task_ids(services):
    ts = services["task_service"]
    seen: list[str] = []

    def _handler(task_id: str) -> None:
        seen.append(task_id)

    domain_events.tasks_changed.connect(_handler)
    project = ts.create_task("Launch", "Product launch", start_date=date(2024, 1, 1), is_project=True)
    ts.update_task(project.id, title="Launch v2")
    ts.delete_task(project.id)
    domain_events.tasks_changed.disconnect(_handler)
    ts.create_task("Other", "Not observed", is_project=True)

    assert seen == [project.id, project.id, project.id]
