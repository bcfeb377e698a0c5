from __future__ import annotations

from datetime import date, datetime

from src.timesheet_system.timesheet_system.common.datetime_utils import (
    add_weeks,
    day_name,
    formatted_date,
    long_format_date,
    subtract_week,
    weekday_index,
    weekday_name,
)


def test_weekday_index_counts_from_sunday():
    assert weekday_index(date(2025, 3, 2)) == 0
    assert weekday_index(date(2025, 3, 5)) == 3
    assert weekday_index(datetime(2025, 3, 8, 12)) == 6


def test_names():
    assert weekday_name(0) == "Sunday"
    assert day_name(date(2025, 3, 5)) == "Wednesday"
    assert long_format_date(date(2025, 3, 5)) == "Wednesday 05 March 2025"
    assert formatted_date(date(2025, 3, 5)) == "05-03-2025"


def test_week_steps():
    assert add_weeks(date(2025, 3, 5)) == date(2025, 3, 12)
    assert subtract_week(date(2025, 3, 5)) == date(2025, 2, 26)
