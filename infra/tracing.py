"""Per-action trace ids for log records, plus last-resort crash logging."""
from __future__ import annotations

import logging
import sys
import threading
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator


logger = logging.getLogger(__name__)

_TRACE_ID: ContextVar[str | None] = ContextVar("task_schedule_trace_id", default=None)
_hooks_installed = False


def new_trace_id() -> str:
    return f"trc-{uuid.uuid4().hex[:12]}"


def current_trace_id() -> str | None:
    return _TRACE_ID.get()


@contextmanager
def bind_trace_id(trace_id: str | None = None) -> Iterator[str]:
    """Tag every log record emitted inside the block with one trace id."""
    value = (trace_id or "").strip() or new_trace_id()
    token = _TRACE_ID.set(value)
    try:
        yield value
    finally:
        _TRACE_ID.reset(token)


class TraceIdLogFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = current_trace_id() or "-"
        return True


def install_crash_logging() -> None:
    """Log uncaught exceptions from the main thread and worker threads, then defer to the previous hooks."""
    global _hooks_installed
    if _hooks_installed:
        return

    previous_excepthook = sys.excepthook
    previous_thread_hook = threading.excepthook

    def _excepthook(exc_type, exc_value, exc_tb) -> None:
        logger.critical("Unhandled exception", exc_info=(exc_type, exc_value, exc_tb))
        previous_excepthook(exc_type, exc_value, exc_tb)

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        name = args.thread.name if args.thread is not None else "?"
        logger.critical(
            "Unhandled exception in thread %s",
            name,
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        )
        previous_thread_hook(args)

    sys.excepthook = _excepthook
    threading.excepthook = _thread_hook
    _hooks_installed = True


__all__ = [
    "TraceIdLogFilter",
    "bind_trace_id",
    "current_trace_id",
    "install_crash_logging",
    "new_trace_id",
]
