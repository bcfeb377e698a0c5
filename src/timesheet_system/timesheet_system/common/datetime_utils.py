from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Union

from ..core.constants import DAYS_PER_WEEK
from ..core.enums import Weekday

DateLike = Union[date, datetime]

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def start_of_day(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        value = value.date()
    return datetime.combine(value, time.min)


def add_days(value: DateLike, days: int) -> DateLike:
    return value + timedelta(days=days)


def add_weeks(value: DateLike, weeks: int = 1) -> DateLike:
    return add_days(value, weeks * DAYS_PER_WEEK)


def subtract_week(value: DateLike) -> DateLike:
    return add_weeks(value, -1)


def add_hours(value: datetime, hours: int) -> datetime:
    return value + timedelta(hours=hours)


def add_minutes(value: datetime, minutes: int) -> datetime:
    return value + timedelta(minutes=minutes)


def weekday_index(value: DateLike) -> int:
    """Day of week where Sunday is 0 and Saturday is 6."""
    return value.isoweekday() % DAYS_PER_WEEK


def weekday_name(number: int) -> str:
    return Weekday(number).label


def day_name(value: DateLike) -> str:
    return weekday_name(weekday_index(value))


def month_name(value: DateLike) -> str:
    return MONTH_NAMES[value.month - 1]


def formatted_date(value: DateLike) -> str:
    """DD-MM-YYYY."""
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"


def long_format_date(value: DateLike) -> str:
    """e.g. Wednesday 05 March 2025."""
    return f"{day_name(value)} {value.day:02d} {month_name(value)} {value.year:04d}"
