from __future__ import annotations

from enum import IntEnum


class Weekday(IntEnum):
    """Day of week numbering used by settings, where Sunday is 0."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()
