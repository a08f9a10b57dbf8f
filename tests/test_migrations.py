from sqlalchemy import create_engine, inspect

from infra.migrate import run_migrations


def test_migrations_create_task_and_note_tables(tmp_path):
    db_path = tmp_path / "schedule.db"

    run_migrations(db_url=db_path.as_posix())

    engine = create_engine(f"sqlite:///{db_path.as_posix()}", future=True)
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names())
        task_columns = {col["name"] for col in inspector.get_columns("tasks")}
    finally:
        engine.dispose()

    assert {"tasks", "task_notes", "alembic_version"} <= tables
    assert {"parent_task_id", "duration_days", "priority", "estimated_hours", "version"} <= task_columns


def test_migrations_are_idempotent(tmp_path):
    db_path = tmp_path / "schedule.db"

    run_migrations(db_url=db_path.as_posix())
    run_migrations(db_url=f"sqlite:///{db_path.as_posix()}")


def test_migration_env_reuses_app_url_normalisation():
    from pathlib import Path

    text = (Path(__file__).resolve().parents[1] / "migration" / "env.py").read_text(encoding="utf-8")

    assert "from infra.db.base import Base, sqlite_url" in text
    assert "render_as_batch=True" in text
