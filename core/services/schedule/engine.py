from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Union

from core.domain import BoundsWindow, ScheduleField, ScheduleState, Task, TaskPriority
from core.services.schedule.rules import (
    DESCRIPTION,
    DURATION_DAYS,
    END_DATE,
    ESTIMATED_HOURS,
    FORM_FIELDS,
    PRIORITY,
    START_DATE,
    TITLE,
    ValidationContext,
    add_days,
    coerce_duration,
    coerce_hours,
    days_between,
    parse_date,
    validate,
)


logger = logging.getLogger(__name__)

_TRIO_FIELDS = (START_DATE, END_DATE, DURATION_DAYS)

_FIELD_BY_TAG = {
    ScheduleField.START: START_DATE,
    ScheduleField.END: END_DATE,
    ScheduleField.DURATION: DURATION_DAYS,
}


# ---- events ----

@dataclass(frozen=True)
class FieldEdited:
    field: str
    value: Any


@dataclass(frozen=True)
class FieldBlurred:
    field: str


@dataclass(frozen=True)
class SubmitAttempted:
    pass


ScheduleEvent = Union[FieldEdited, FieldBlurred, SubmitAttempted]


# ---- reducer ----

def _context(state: ScheduleState, bounds: BoundsWindow) -> ValidationContext:
    return ValidationContext(start_date=state.start_date, end_date=state.end_date, bounds=bounds)


def _with_errors(state: ScheduleState, fields: tuple[str, ...], bounds: BoundsWindow) -> ScheduleState:
    ctx = _context(state, bounds)
    errors = dict(state.field_errors)
    for name in fields:
        errors[name] = validate(name, getattr(state, name), ctx)
    return replace(state, field_errors=errors)


def _edit_start(state: ScheduleState, value: Any) -> ScheduleState:
    try:
        start = parse_date(value)
    except ValueError:
        logger.debug("Ignoring unparsable start date %r", value)
        return state
    end, duration = state.end_date, state.duration_days
    if start is not None and duration > 0:
        end = add_days(start, duration)
    elif start is not None and end is not None:
        duration = days_between(start, end)
    return replace(
        state, start_date=start, end_date=end, duration_days=duration, last_changed=ScheduleField.START
    )


def _edit_end(state: ScheduleState, value: Any) -> ScheduleState:
    try:
        end = parse_date(value)
    except ValueError:
        logger.debug("Ignoring unparsable end date %r", value)
        return state
    duration = state.duration_days
    # An end before the start is an ordering error; duration keeps its last value.
    if state.start_date is not None and end is not None and end >= state.start_date:
        duration = days_between(state.start_date, end)
    return replace(state, end_date=end, duration_days=duration, last_changed=ScheduleField.END)


def _edit_duration(state: ScheduleState, value: Any) -> ScheduleState:
    duration = coerce_duration(value)
    end = state.end_date
    if state.start_date is not None:
        end = add_days(state.start_date, duration)
    return replace(state, duration_days=duration, end_date=end, last_changed=ScheduleField.DURATION)


def _edit_priority(state: ScheduleState, value: Any) -> ScheduleState:
    if isinstance(value, TaskPriority):
        return replace(state, priority=value)
    try:
        return replace(state, priority=TaskPriority(str(value).strip().lower()))
    except ValueError:
        logger.debug("Ignoring unknown priority %r", value)
        return state


def _apply_edit(state: ScheduleState, name: str, value: Any, bounds: BoundsWindow) -> ScheduleState:
    if name == START_DATE:
        state = _edit_start(state, value)
    elif name == END_DATE:
        state = _edit_end(state, value)
    elif name == DURATION_DAYS:
        state = _edit_duration(state, value)
    elif name in (TITLE, DESCRIPTION):
        state = replace(state, **{name: "" if value is None else str(value)})
    elif name == ESTIMATED_HOURS:
        state = replace(state, estimated_hours=coerce_hours(value))
    elif name == PRIORITY:
        return _edit_priority(state, value)
    else:
        raise KeyError(f"Unknown form field: {name}")

    affected = _TRIO_FIELDS if name in _TRIO_FIELDS else (name,)
    return _with_errors(state, affected, bounds)


def reduce_schedule(state: ScheduleState, event: ScheduleEvent, bounds: BoundsWindow) -> ScheduleState:
    """Pure transition ``(state, event) -> state`` for one open task form."""
    if isinstance(event, FieldEdited):
        return _apply_edit(state, event.field, event.value, bounds)
    if isinstance(event, FieldBlurred):
        state = replace(state, touched=state.touched | {event.field})
        return _with_errors(state, (event.field,), bounds)
    if isinstance(event, SubmitAttempted):
        state = replace(state, touched=frozenset(FORM_FIELDS) | state.touched, submit_attempted=True)
        return _with_errors(state, FORM_FIELDS, bounds)
    raise TypeError(f"Unsupported schedule event: {event!r}")


def initial_state(task: Optional[Task] = None) -> ScheduleState:
    if task is None:
        return ScheduleState()
    duration = max(0, int(task.duration_days or 0))
    if not duration and task.start_date and task.end_date:
        duration = days_between(task.start_date, task.end_date)
    return ScheduleState(
        title=task.title or "",
        description=task.description or "",
        start_date=task.start_date,
        end_date=task.end_date,
        duration_days=duration,
        priority=task.priority or TaskPriority.MEDIUM,
        estimated_hours=coerce_hours(task.estimated_hours),
    )


def _field_name(field: Union[str, ScheduleField]) -> str:
    if isinstance(field, ScheduleField):
        try:
            return _FIELD_BY_TAG[field]
        except KeyError:
            raise KeyError(f"{field} is not an editable field") from None
    return field


class ScheduleConsistencyEngine:
    """
    Keeps start date, end date and duration of one task form consistent.

    The most recently edited field wins; ``start_date`` is the pivot the other
    two are measured from. Errors are computed on every change but only
    reported by :meth:`visible_errors` once a field was blurred or a submit
    was attempted.
    """

    def __init__(self, task: Optional[Task] = None, bounds: Optional[BoundsWindow] = None):
        self._bounds = bounds or BoundsWindow()
        self._state = initial_state(task)

    @property
    def bounds(self) -> BoundsWindow:
        return self._bounds

    def dispatch(self, event: ScheduleEvent) -> ScheduleState:
        self._state = reduce_schedule(self._state, event, self._bounds)
        return self._state

    def set_field(self, field: Union[str, ScheduleField], raw_value: Any) -> ScheduleState:
        return self.dispatch(FieldEdited(_field_name(field), raw_value))

    def blur(self, field: Union[str, ScheduleField]) -> str:
        name = _field_name(field)
        self.dispatch(FieldBlurred(name))
        return self._state.field_errors.get(name, "")

    def validate_all(self) -> dict[str, str]:
        state = self.dispatch(SubmitAttempted())
        return {name: state.field_errors.get(name, "") for name in FORM_FIELDS}

    def snapshot(self) -> ScheduleState:
        return self._state

    def visible_errors(self) -> Mapping[str, str]:
        state = self._state
        return {
            name: message
            for name, message in state.field_errors.items()
            if message and (state.submit_attempted or name in state.touched)
        }


__all__ = [
    "FieldEdited",
    "FieldBlurred",
    "SubmitAttempted",
    "ScheduleEvent",
    "reduce_schedule",
    "initial_state",
    "ScheduleConsistencyEngine",
]
