from __future__ import annotations

from datetime import datetime

from ..common.datetime_utils import DateLike, add_days, start_of_day, weekday_index
from ..core.constants import DAYS_PER_WEEK
from .model import WeekRange


def start_of_week(value: DateLike, first_day_of_week: int) -> datetime:
    """Midnight on the first day of the week containing `value`.

    `first_day_of_week` counts from Sunday = 0 and must already be in 0..6.
    """
    offset = first_day_of_week - weekday_index(value)
    return start_of_day(add_days(value, offset))


def end_of_week(value: DateLike, first_day_of_week: int) -> datetime:
    """Midnight on the first day of the following week."""
    offset = first_day_of_week - weekday_index(value)
    return start_of_day(add_days(value, offset + DAYS_PER_WEEK))


def week_bounds(value: DateLike, first_day_of_week: int) -> WeekRange:
    return WeekRange(
        start=start_of_week(value, first_day_of_week),
        end=end_of_week(value, first_day_of_week),
    )
