from __future__ import annotations

from datetime import date, datetime, timedelta

from src.timesheet_system.timesheet_system.weeks.calculator import end_of_week, start_of_week, week_bounds


def test_monday_week_for_wednesday():
    wednesday = datetime(2025, 3, 5, 14, 30)

    assert start_of_week(wednesday, 1) == datetime(2025, 3, 3)
    assert end_of_week(wednesday, 1) == datetime(2025, 3, 10)


def test_sunday_week_for_wednesday():
    assert start_of_week(date(2025, 3, 5), 0) == datetime(2025, 3, 2)
    assert end_of_week(date(2025, 3, 5), 0) == datetime(2025, 3, 9)


def test_week_crossing_year_boundary_is_seven_days():
    week = week_bounds(date(2025, 1, 1), 1)

    assert week.start == datetime(2024, 12, 30)
    assert week.end == datetime(2025, 1, 6)
    assert week.end - week.start == timedelta(days=7)


def test_first_day_of_week_on_the_date_itself():
    assert start_of_week(date(2025, 3, 3), 1) == datetime(2025, 3, 3)


def test_day_before_first_day_shifts_forward():
    # Sunday with weeks starting Monday: offset is +1 day
    assert start_of_week(date(2025, 3, 9), 1) == datetime(2025, 3, 10)
    assert end_of_week(date(2025, 3, 9), 1) == datetime(2025, 3, 17)


def test_week_range_navigation_and_days():
    week = week_bounds(date(2025, 3, 5), 1)

    assert week.contains(datetime(2025, 3, 9, 23, 59))
    assert not week.contains(datetime(2025, 3, 10))
    assert week.previous().start == datetime(2025, 2, 24)
    assert week.next().end == datetime(2025, 3, 17)
    assert [d.day for d in week.days()] == [3, 4, 5, 6, 7, 8, 9]
