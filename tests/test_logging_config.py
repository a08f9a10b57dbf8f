from __future__ import annotations

import logging

import pytest

from infra import logging_config
from infra import version as version_mod
from infra.tracing import TraceIdLogFilter, bind_trace_id, current_trace_id


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_writes_rotating_log_with_trace_ids(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.delenv("PM_LOG_LEVEL", raising=False)
    log_file = logging_config.setup_logging(tmp_path / "logs")

    with bind_trace_id("inc-form-1"):
        logging.getLogger("core.services.task").info("saved task t-1")
    for handler in restore_root_logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert log_file.name == "app.log"
    assert "trace=inc-form-1 core.services.task - saved task t-1" in text
    assert restore_root_logger.level == logging.INFO


def test_log_level_comes_from_environment(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.setenv("PM_LOG_LEVEL", "debug")
    logging_config.setup_logging(tmp_path)
    assert restore_root_logger.level == logging.DEBUG

    monkeypatch.setenv("PM_LOG_LEVEL", "chatty")
    logging_config.setup_logging(tmp_path)
    assert restore_root_logger.level == logging.INFO


def test_trace_filter_uses_placeholder_outside_a_bound_block():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    assert TraceIdLogFilter().filter(record)
    assert record.trace_id == "-"

    with bind_trace_id() as trace_id:
        assert trace_id.startswith("trc-")
        assert current_trace_id() == trace_id
    assert current_trace_id() is None


def test_app_version_env_override_wins(monkeypatch):
    def _not_installed(_name):
        raise version_mod.metadata.PackageNotFoundError(_name)

    monkeypatch.setattr(version_mod.metadata, "version", _not_installed)
    monkeypatch.delenv("PM_APP_VERSION", raising=False)
    assert version_mod.get_app_version() == version_mod._DEFAULT_APP_VERSION

    monkeypatch.setenv("PM_APP_VERSION", "2.0.0")
    assert version_mod.get_app_version() == "2.0.0"
