from __future__ import annotations

import logging
import sys
from pathlib import Path

from alembic import command
from alembic.config import Config

from infra.db.base import sqlite_url

logger = logging.getLogger(__name__)


def _app_dir() -> Path:
    """Bundle dir for frozen builds (``sys._MEIPASS`` or the exe folder), else the project root."""
    if getattr(sys, "frozen", False):
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            return Path(meipass).resolve()
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


def _alembic_config(db_url: str) -> Config:
    app_dir = _app_dir()
    for script_location in (app_dir / "migration", app_dir / "_internal" / "migration"):
        alembic_ini = script_location / "alembic.ini"
        if alembic_ini.exists():
            break
    else:
        raise RuntimeError(f"Alembic config not found under {app_dir}")

    cfg = Config(str(alembic_ini))
    cfg.set_main_option("script_location", str(script_location))
    cfg.set_main_option("sqlalchemy.url", db_url)
    return cfg


def run_migrations(db_url: str) -> None:
    """Upgrade the database at ``db_url`` (a SQLAlchemy URL or a bare SQLite path) to head."""
    url = sqlite_url(db_url)
    logger.info("Running migrations on %s", url)
    command.upgrade(_alembic_config(url), "head")
