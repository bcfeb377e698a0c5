from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..common.datetime_utils import add_weeks, subtract_week
from ..core.constants import DAYS_PER_WEEK


@dataclass(frozen=True)
class WeekRange:
    """Half-open [start, end) span of one week, both at midnight."""

    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end

    def previous(self) -> WeekRange:
        return WeekRange(subtract_week(self.start), self.start)

    def next(self) -> WeekRange:
        return WeekRange(self.end, add_weeks(self.end))

    def days(self) -> list[datetime]:
        return [self.start + timedelta(days=i) for i in range(DAYS_PER_WEEK)]
