# infra/db/base.py
from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from infra.path import default_db_path

logger = logging.getLogger(__name__)

Base = declarative_base()


def sqlite_url(db_path: str | Path) -> str:
    """SQLAlchemy URL for ``db_path``; full URLs are passed through unchanged."""
    text = str(db_path)
    if "://" in text:
        return text
    return f"sqlite:///{Path(text).as_posix()}"


def make_engine(db_url: str) -> Engine:
    new_engine = create_engine(db_url, echo=False, future=True)
    if new_engine.dialect.name == "sqlite":
        # Notes are removed with their task via ON DELETE CASCADE.
        @event.listens_for(new_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


db_path: Path = default_db_path()
db_path.parent.mkdir(parents=True, exist_ok=True)

db_url = sqlite_url(db_path)
logger.info("Using SQLite database at: %s", db_url)

engine = make_engine(db_url)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
