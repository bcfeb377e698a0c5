from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..clock.model import EMPTY_TIME, ClockTime, InvalidTime, parse_clock_time
from ..common.datetime_utils import DateLike
from ..core.exceptions import FormValidationError

SHIFT_TIME_FIELDS = ("startTime", "endTime", "breakDuration")


@dataclass(frozen=True)
class Shift:
    """Persisted work interval: absolute start/end and break in minutes."""

    start: datetime
    end: datetime
    break_duration: int = 0


@dataclass(frozen=True)
class ShiftTimesInput:
    """Clock times of one shift while it is being edited on a form."""

    start_time: ClockTime = EMPTY_TIME
    end_time: ClockTime = EMPTY_TIME
    break_duration: ClockTime = EMPTY_TIME

    @classmethod
    def from_form(cls, values: Mapping[str, Any]) -> ShiftTimesInput:
        """Parse `startTime`, `endTime` and `breakDuration` form values.

        Every field is parsed before failing so the caller can show all
        per-field messages at once.
        """
        parsed = {}
        errors = {}
        for field in SHIFT_TIME_FIELDS:
            result = parse_clock_time(values.get(field))
            if isinstance(result, InvalidTime):
                errors[field] = result.message
            else:
                parsed[field] = result.time
        if errors:
            raise FormValidationError(errors)

        return cls(
            start_time=parsed["startTime"],
            end_time=parsed["endTime"],
            break_duration=parsed["breakDuration"],
        )

    def is_empty(self) -> bool:
        return self.start_time.is_empty() and self.end_time.is_empty() and self.break_duration.is_empty()

    def is_complete(self) -> bool:
        return not (self.start_time.is_empty() or self.end_time.is_empty() or self.break_duration.is_empty())

    def to_shift(self, day: DateLike) -> Shift:
        return Shift(
            start=self.start_time.to_datetime(day),
            end=self.end_time.to_datetime(day),
            break_duration=self.break_duration.to_minutes(),
        )

    def to_form(self) -> dict[str, str]:
        return {
            "startTime": str(self.start_time),
            "endTime": str(self.end_time),
            "breakDuration": str(self.break_duration),
        }
