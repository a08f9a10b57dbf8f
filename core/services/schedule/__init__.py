from core.services.schedule.bounds import MAX_ANCESTOR_HOPS, AncestorBoundsResolver
from core.services.schedule.engine import (
    FieldBlurred,
    FieldEdited,
    ScheduleConsistencyEngine,
    SubmitAttempted,
    initial_state,
    reduce_schedule,
)
from core.services.schedule.rules import ValidationContext, validate, validate_values

__all__ = [
    "AncestorBoundsResolver",
    "MAX_ANCESTOR_HOPS",
    "ScheduleConsistencyEngine",
    "FieldEdited",
    "FieldBlurred",
    "SubmitAttempted",
    "initial_state",
    "reduce_schedule",
    "ValidationContext",
    "validate",
    "validate_values",
]
