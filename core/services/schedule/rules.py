"""Field rules shared by blur validation, submit validation and the task service.

Every rule is a pure function of a value and a :class:`ValidationContext`, so
the form and the persistence layer can never disagree about a value.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Callable, Optional

from core.domain import BoundsWindow

TITLE = "title"
DESCRIPTION = "description"
START_DATE = "start_date"
END_DATE = "end_date"
DURATION_DAYS = "duration_days"
ESTIMATED_HOURS = "estimated_hours"
PRIORITY = "priority"

FORM_FIELDS: tuple[str, ...] = (
    TITLE,
    DESCRIPTION,
    START_DATE,
    END_DATE,
    ESTIMATED_HOURS,
    DURATION_DAYS,
)

MSG_TITLE_REQUIRED = "Name required"
MSG_DESCRIPTION_REQUIRED = "Description required"
MSG_START_AFTER_END = "Start date cannot be later than end date"
MSG_START_OUT_OF_BOUNDS = "Start date is outside the project dates"
MSG_END_BEFORE_START = "End date cannot be earlier than start date"
MSG_END_OUT_OF_BOUNDS = "End date is outside the project dates"
MSG_NEGATIVE_DURATION = "Duration cannot be negative"
MSG_DURATION_TOO_LONG = "Duration is too long"
MSG_END_OUT_OF_RANGE = "End date is out of range"
MSG_NEGATIVE_HOURS = "Estimated hours cannot be negative"

# A century; longer spans are rejected and input is clamped to it.
MAX_DURATION_DAYS = 36500

# Service-level error codes, keyed by message.
ERROR_CODES: dict[str, str] = {
    MSG_TITLE_REQUIRED: "TASK_TITLE_EMPTY",
    MSG_DESCRIPTION_REQUIRED: "TASK_DESCRIPTION_EMPTY",
    MSG_START_AFTER_END: "TASK_DATE_ORDER",
    MSG_END_BEFORE_START: "TASK_DATE_ORDER",
    MSG_START_OUT_OF_BOUNDS: "TASK_INVALID_DATE",
    MSG_END_OUT_OF_BOUNDS: "TASK_INVALID_DATE",
    MSG_NEGATIVE_DURATION: "TASK_NEGATIVE_DURATION",
    MSG_DURATION_TOO_LONG: "TASK_DURATION_TOO_LONG",
    MSG_END_OUT_OF_RANGE: "TASK_INVALID_DATE",
    MSG_NEGATIVE_HOURS: "TASK_NEGATIVE_HOURS",
}


@dataclass(frozen=True)
class ValidationContext:
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    bounds: BoundsWindow = field(default_factory=BoundsWindow)


# ---- value coercion (input layer) ----

def parse_date(value: Any) -> date | None:
    if value in (None, ""):
        return None
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    raise ValueError(f"Unsupported date value: {value!r}")


def coerce_duration(value: Any) -> int:
    """Parse a raw duration and clamp it to 0..MAX_DURATION_DAYS; unparsable input becomes 0."""
    if value in (None, ""):
        return 0
    try:
        days = int(str(value).strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return min(max(0, days), MAX_DURATION_DAYS)


def coerce_hours(value: Any) -> float:
    """Parse raw hours; negative or non-finite input becomes 0."""
    if value in (None, ""):
        return 0.0
    try:
        hours = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(hours):
        return 0.0
    return max(0.0, hours)


# ---- date arithmetic ----

def add_days(start: date, days: int) -> date | None:
    """``start`` shifted by ``days``, or None when the result is outside the calendar."""
    try:
        return start + timedelta(days=int(days))
    except OverflowError:
        return None


def days_between(start: date, end: date) -> int:
    """Whole days from start to end, clamped at 0."""
    return max(0, (end - start).days)


# ---- rules ----

def _required(message: str) -> Callable[[Any, ValidationContext], str]:
    def rule(value: Any, ctx: ValidationContext) -> str:
        if not str(value or "").strip():
            return message
        return ""

    return rule


def _validate_start(value: Any, ctx: ValidationContext) -> str:
    if value is None:
        return ""
    if ctx.end_date is not None and value > ctx.end_date:
        return MSG_START_AFTER_END
    if not ctx.bounds.contains(value):
        return MSG_START_OUT_OF_BOUNDS
    return ""


def _validate_end(value: Any, ctx: ValidationContext) -> str:
    if value is None:
        return ""
    if ctx.start_date is not None and value < ctx.start_date:
        return MSG_END_BEFORE_START
    if not ctx.bounds.contains(value):
        return MSG_END_OUT_OF_BOUNDS
    return ""


def _validate_duration(value: Any, ctx: ValidationContext) -> str:
    if value is None:
        return ""
    if value < 0:
        return MSG_NEGATIVE_DURATION
    if value > MAX_DURATION_DAYS:
        return MSG_DURATION_TOO_LONG
    return ""


def _non_negative(message: str) -> Callable[[Any, ValidationContext], str]:
    def rule(value: Any, ctx: ValidationContext) -> str:
        if value is not None and value < 0:
            return message
        return ""

    return rule


_RULES: dict[str, Callable[[Any, ValidationContext], str]] = {
    TITLE: _required(MSG_TITLE_REQUIRED),
    DESCRIPTION: _required(MSG_DESCRIPTION_REQUIRED),
    START_DATE: _validate_start,
    END_DATE: _validate_end,
    DURATION_DAYS: _validate_duration,
    ESTIMATED_HOURS: _non_negative(MSG_NEGATIVE_HOURS),
}


def validate(field_name: str, value: Any, context: ValidationContext) -> str:
    """Return the error message for ``field_name`` or "" when the value is valid."""
    rule = _RULES.get(field_name)
    if rule is None:
        return ""
    return rule(value, context)


def validate_values(values: dict[str, Any], bounds: BoundsWindow | None = None) -> dict[str, str]:
    """Validate every form field in ``values``; only failing fields are returned."""
    ctx = ValidationContext(
        start_date=values.get(START_DATE),
        end_date=values.get(END_DATE),
        bounds=bounds or BoundsWindow(),
    )
    errors: dict[str, str] = {}
    for name in FORM_FIELDS:
        message = validate(name, values.get(name), ctx)
        if message:
            errors[name] = message
    return errors


__all__ = [
    "TITLE",
    "DESCRIPTION",
    "START_DATE",
    "END_DATE",
    "DURATION_DAYS",
    "ESTIMATED_HOURS",
    "PRIORITY",
    "FORM_FIELDS",
    "MAX_DURATION_DAYS",
    "ERROR_CODES",
    "ValidationContext",
    "parse_date",
    "coerce_duration",
    "coerce_hours",
    "add_days",
    "days_between",
    "validate",
    "validate_values",
]
