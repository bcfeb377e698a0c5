from __future__ import annotations

from typing import Optional

from ..clock.model import ClockTime
from ..core.constants import MINUTES_PER_HOUR
from .model import Shift, ShiftTimesInput


def shift_hours_from_times(times: ShiftTimesInput) -> Optional[float]:
    """Worked hours while a shift is still being edited.

    Returns None until all three times are filled in. A shift ending at or
    before its start (after the break) counts as 0 hours, never negative.
    """
    if not times.is_complete():
        return None

    minutes = times.end_time.to_minutes() - times.start_time.to_minutes() - times.break_duration.to_minutes()
    if minutes <= 0:
        return 0
    return ClockTime.from_minutes(minutes).to_hours()


def shift_hours(shift: Shift) -> float:
    """Worked hours of a stored shift: (end - start) - break, unclamped."""
    minutes = (shift.end - shift.start).total_seconds() / 60 - shift.break_duration
    return minutes / MINUTES_PER_HOUR
