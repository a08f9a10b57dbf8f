from __future__ import annotations

from datetime import date
from typing import Any, Optional

from core.domain import BoundsWindow
from core.exceptions import BusinessRuleError, ValidationError
from core.services.schedule.bounds import AncestorBoundsResolver
from core.services.schedule.rules import (
    ERROR_CODES,
    FORM_FIELDS,
    MAX_DURATION_DAYS,
    MSG_DURATION_TOO_LONG,
    MSG_END_OUT_OF_RANGE,
    add_days,
    days_between,
    validate_values,
)


class TaskValidationMixin:
    _bounds_resolver: AncestorBoundsResolver

    def _normalize_schedule(
        self,
        start_date: Optional[date],
        end_date: Optional[date],
        duration_days: Optional[int],
    ) -> tuple[Optional[date], Optional[date], int]:
        duration = 0 if duration_days is None else int(duration_days)
        if duration < 0:
            raise ValidationError(
                "Task duration_days cannot be negative.",
                code="TASK_NEGATIVE_DURATION",
                field="duration_days",
            )
        if start_date and end_date:
            if end_date >= start_date:
                duration = days_between(start_date, end_date)
        elif start_date and duration > 0:
            if duration > MAX_DURATION_DAYS:
                raise ValidationError(
                    MSG_DURATION_TOO_LONG, code="TASK_DURATION_TOO_LONG", field="duration_days"
                )
            end_date = add_days(start_date, duration)
            if end_date is None:
                raise ValidationError(MSG_END_OUT_OF_RANGE, code="TASK_INVALID_DATE", field="end_date")
        return start_date, end_date, duration

    def _validate_task_values(self, values: dict[str, Any], bounds: BoundsWindow) -> None:
        errors = validate_values(values, bounds)
        for name in FORM_FIELDS:
            message = errors.get(name)
            if message:
                raise ValidationError(message, code=ERROR_CODES.get(message), field=name)

    def _validate_hierarchy(self, parent_task_id: Optional[str], is_project: bool) -> None:
        if is_project and parent_task_id:
            raise BusinessRuleError(
                "A project cannot be nested under another task.",
                code="PROJECT_HAS_PARENT",
            )
