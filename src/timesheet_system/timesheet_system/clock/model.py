from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional, Union

from ..common.datetime_utils import DateLike, add_hours, add_minutes, now_local, start_of_day
from ..common.validators import parse_int
from ..core.constants import HOURS_PER_DAY, MINUTES_PER_DAY, MINUTES_PER_HOUR
from ..core.exceptions import InvalidTimeError


def _component(value: Any, name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    number = parse_int(value)
    if number is None:
        raise InvalidTimeError(f"{name} contains an invalid value")
    return number


@dataclass(frozen=True)
class ClockTime:
    """An hours:minutes time of day where either component may be unset.

    Unset components represent a form field that has not been filled in yet;
    they are distinct from zero for `is_empty()` but count as zero in every
    arithmetic operation.
    """

    hours: Optional[int] = None
    minutes: Optional[int] = None

    def __post_init__(self) -> None:
        hours = _component(self.hours, "hours")
        minutes = _component(self.minutes, "minutes")

        if hours is not None and not 0 <= hours < HOURS_PER_DAY:
            raise InvalidTimeError("hours must be between 0 and 23")
        if minutes is not None and not 0 <= minutes < MINUTES_PER_HOUR:
            raise InvalidTimeError("minutes must be between 0 and 59")

        object.__setattr__(self, "hours", hours)
        object.__setattr__(self, "minutes", minutes)

    @classmethod
    def from_datetime(cls, value: datetime) -> ClockTime:
        return cls(value.hour, value.minute)

    @classmethod
    def now(cls, clock: Callable[[], datetime] = now_local) -> ClockTime:
        return cls.from_datetime(clock())

    @classmethod
    def from_string(cls, value: str) -> ClockTime:
        """Parse a string formatted as HH:MM."""
        components = value.split(":")
        if len(components) != 2:
            raise InvalidTimeError(f"{value} is not formatted as HH:MM")

        hours, minutes = (parse_int(c) for c in components)
        if hours is None or minutes is None:
            raise InvalidTimeError(f"{value} is not formatted as HH:MM")
        return cls(hours, minutes)

    @classmethod
    def from_mapping(cls, value: Mapping[str, Any]) -> ClockTime:
        return cls(value.get("hours"), value.get("minutes"))

    @classmethod
    def from_minutes(cls, total_minutes: int) -> ClockTime:
        """Normalize any number of minutes into a time of day."""
        total_hours = total_minutes // MINUTES_PER_HOUR
        return cls(total_hours % HOURS_PER_DAY, total_minutes % MINUTES_PER_HOUR)

    def is_empty(self) -> bool:
        return self.hours is None and self.minutes is None

    def to_tuple(self) -> tuple[Optional[int], Optional[int]]:
        return self.hours, self.minutes

    def to_minutes(self) -> int:
        return (self.hours or 0) * MINUTES_PER_HOUR + (self.minutes or 0)

    def to_hours(self) -> float:
        return self.to_minutes() / MINUTES_PER_HOUR

    def to_datetime(self, day: DateLike) -> datetime:
        """Combine with the midnight of `day`."""
        return add_minutes(add_hours(start_of_day(day), self.hours or 0), self.minutes or 0)

    def add(self, other: ClockTime) -> ClockTime:
        return ClockTime.from_minutes(self.to_minutes() + other.to_minutes())

    def subtract(self, other: ClockTime) -> ClockTime:
        """Same-day difference; a negative result wraps to the next day."""
        diff = self.to_minutes() - other.to_minutes()
        if diff < 0:
            diff += MINUTES_PER_DAY
        return ClockTime.from_minutes(diff)

    def __str__(self) -> str:
        return f"{self.hours or 0:02d}:{self.minutes or 0:02d}"


EMPTY_TIME = ClockTime()


@dataclass(frozen=True)
class ValidTime:
    time: ClockTime
    ok: bool = True


@dataclass(frozen=True)
class InvalidTime:
    message: str
    ok: bool = False


ClockTimeResult = Union[ValidTime, InvalidTime]


def coerce_clock_time(value: Any) -> ClockTime:
    """Build a ClockTime from any representation the form layer hands over."""
    if isinstance(value, ClockTime):
        return value
    if value is None or value == "":
        return EMPTY_TIME
    if isinstance(value, datetime):
        return ClockTime.from_datetime(value)
    if isinstance(value, str):
        return ClockTime.from_string(value)
    if isinstance(value, Mapping):
        return ClockTime.from_mapping(value)
    raise InvalidTimeError(f"{value!r} is not a time")


def parse_clock_time(value: Any) -> ClockTimeResult:
    """Fallible counterpart of `coerce_clock_time`."""
    try:
        return ValidTime(coerce_clock_time(value))
    except InvalidTimeError as e:
        return InvalidTime(str(e))
