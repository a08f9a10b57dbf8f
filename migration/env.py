"""Alembic environment for the tasks database; the URL is set by infra.migrate.run_migrations."""
import logging
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from infra.db.base import Base, sqlite_url
import infra.db.models  # noqa

config = context.config

# Keep the application's handlers when migrations run at startup.
if config.config_file_name is not None and not logging.getLogger().handlers:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

# SQLite cannot ALTER most columns in place; batch mode rebuilds tables.
MIGRATION_OPTIONS = dict(target_metadata=Base.metadata, render_as_batch=True, compare_type=True)


def _url() -> str:
    return sqlite_url(config.get_main_option("sqlalchemy.url"))


if context.is_offline_mode():
    context.configure(url=_url(), literal_binds=True, dialect_opts={"paramstyle": "named"}, **MIGRATION_OPTIONS)
    with context.begin_transaction():
        context.run_migrations()
else:
    connectable = engine_from_config(
        {"sqlalchemy.url": _url()}, prefix="sqlalchemy.", poolclass=pool.NullPool, future=True
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, **MIGRATION_OPTIONS)
        with context.begin_transaction():
            context.run_migrations()
