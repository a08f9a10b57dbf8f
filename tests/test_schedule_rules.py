from datetime import date

import pytest

from core.domain import BoundsWindow
from core.services.schedule.rules import (
    MAX_DURATION_DAYS,
    MSG_DESCRIPTION_REQUIRED,
    MSG_DURATION_TOO_LONG,
    MSG_END_BEFORE_START,
    MSG_END_OUT_OF_BOUNDS,
    MSG_NEGATIVE_DURATION,
    MSG_NEGATIVE_HOURS,
    MSG_START_AFTER_END,
    MSG_START_OUT_OF_BOUNDS,
    MSG_TITLE_REQUIRED,
    ValidationContext,
    add_days,
    coerce_duration,
    days_between,
    parse_date,
    validate,
    validate_values,
)

BOUNDS = BoundsWindow(start=date(2024, 1, 1), end=date(2024, 12, 31))


def test_required_text_fields():
    ctx = ValidationContext()
    assert validate("title", "  ", ctx) == MSG_TITLE_REQUIRED
    assert validate("title", None, ctx) == MSG_TITLE_REQUIRED
    assert validate("title", "Plan", ctx) == ""
    assert validate("description", "\n", ctx) == MSG_DESCRIPTION_REQUIRED


def test_date_ordering_rules():
    ctx = ValidationContext(start_date=date(2024, 3, 10), end_date=date(2024, 3, 5))
    assert validate("start_date", ctx.start_date, ctx) == MSG_START_AFTER_END
    assert validate("end_date", ctx.end_date, ctx) == MSG_END_BEFORE_START


def test_same_day_is_not_an_ordering_error():
    ctx = ValidationContext(start_date=date(2024, 3, 5), end_date=date(2024, 3, 5))
    assert validate("start_date", ctx.start_date, ctx) == ""
    assert validate("end_date", ctx.end_date, ctx) == ""


def test_bounds_rules_are_inclusive():
    ctx = ValidationContext(bounds=BOUNDS)
    assert validate("start_date", date(2024, 1, 1), ctx) == ""
    assert validate("end_date", date(2024, 12, 31), ctx) == ""
    assert validate("start_date", date(2023, 12, 31), ctx) == MSG_START_OUT_OF_BOUNDS
    assert validate("end_date", date(2025, 1, 1), ctx) == MSG_END_OUT_OF_BOUNDS


def test_half_open_bounds_only_constrain_one_side():
    ctx = ValidationContext(bounds=BoundsWindow(start=date(2024, 1, 1)))
    assert validate("end_date", date(2030, 1, 1), ctx) == ""
    assert validate("start_date", date(2023, 1, 1), ctx) == MSG_START_OUT_OF_BOUNDS


def test_unset_dates_are_valid():
    ctx = ValidationContext(bounds=BOUNDS)
    assert validate("start_date", None, ctx) == ""
    assert validate("end_date", None, ctx) == ""


def test_negative_numbers_are_rejected_by_rules():
    ctx = ValidationContext()
    assert validate("duration_days", -1, ctx) == MSG_NEGATIVE_DURATION
    assert validate("estimated_hours", -0.5, ctx) == MSG_NEGATIVE_HOURS
    assert validate("duration_days", 0, ctx) == ""


def test_unknown_field_has_no_rule():
    assert validate("priority", "anything", ValidationContext()) == ""


def test_validate_values_returns_only_failing_fields():
    errors = validate_values(
        {
            "title": "Plan",
            "description": "",
            "start_date": date(2025, 2, 1),
            "end_date": None,
            "duration_days": 0,
            "estimated_hours": 1.0,
        },
        BOUNDS,
    )
    assert errors == {
        "description": MSG_DESCRIPTION_REQUIRED,
        "start_date": MSG_START_OUT_OF_BOUNDS,
    }


def test_parse_date_accepts_iso_strings_dates_and_blanks():
    assert parse_date("2024-03-01") == date(2024, 3, 1)
    assert parse_date(date(2024, 3, 1)) == date(2024, 3, 1)
    assert parse_date("") is None
    assert parse_date(None) is None
    with pytest.raises(ValueError):
        parse_date(20240301)


def test_coerce_and_difference_helpers():
    assert coerce_duration("12") == 12
    assert coerce_duration(-4) == 0
    assert days_between(date(2024, 3, 6), date(2024, 3, 1)) == 0
    assert days_between(date(2024, 2, 28), date(2024, 3, 1)) == 2


def test_duration_longer_than_a_century_is_rejected_and_clamped_at_input():
    ctx = ValidationContext()
    assert validate("duration_days", MAX_DURATION_DAYS, ctx) == ""
    assert validate("duration_days", MAX_DURATION_DAYS + 1, ctx) == MSG_DURATION_TOO_LONG
    assert coerce_duration(10**7) == MAX_DURATION_DAYS
    assert coerce_duration(str(10**30)) == MAX_DURATION_DAYS


def test_add_days_past_the_calendar_returns_none():
    assert add_days(date(2024, 3, 1), 5) == date(2024, 3, 6)
    assert add_days(date(9999, 12, 1), 31) is None
    assert add_days(date(2024, 3, 1), 10**7) is None
