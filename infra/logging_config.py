# infra/logging_config.py
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from infra.path import user_data_dir
from infra.tracing import TraceIdLogFilter, install_crash_logging
from infra.version import get_app_version

FILE_FORMAT = "%(asctime)s [%(levelname)s] trace=%(trace_id)s %(name)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s [trace=%(trace_id)s]: %(message)s"
MAX_LOG_BYTES = 1_000_000
LOG_BACKUPS = 5


def _level_from_env() -> int:
    name = (os.getenv("PM_LOG_LEVEL") or "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _traced(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.addFilter(TraceIdLogFilter())
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def setup_logging(log_dir: Path | None = None) -> Path:
    """
    Route all logging to ``<log_dir>/app.log`` (rotating) and the console.

    ``log_dir`` defaults to ``<user data dir>/logs``; the level comes from
    PM_LOG_LEVEL. Returns the log file path.
    """
    log_dir = log_dir or (user_data_dir() / "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "app.log"

    root = logging.getLogger()
    root.setLevel(_level_from_env())
    root.handlers.clear()

    root.addHandler(
        _traced(
            RotatingFileHandler(log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"),
            FILE_FORMAT,
        )
    )
    root.addHandler(_traced(logging.StreamHandler(), CONSOLE_FORMAT))

    install_crash_logging()
    root.info("Logging initialized (v%s). Log file at %s", get_app_version(), log_file)
    return log_file
