from __future__ import annotations

import os
from importlib import metadata


DISTRIBUTION_NAME = "task-schedule-lite"
_DEFAULT_APP_VERSION = "1.0.0"


def get_app_version() -> str:
    """PM_APP_VERSION, then the installed distribution's version, then the built-in default."""
    env_override = (os.getenv("PM_APP_VERSION") or "").strip()
    if env_override:
        return env_override
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return _DEFAULT_APP_VERSION


__all__ = ["DISTRIBUTION_NAME", "get_app_version"]
