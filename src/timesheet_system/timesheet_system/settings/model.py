from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_FIRST_DAY_OF_WEEK


@dataclass(frozen=True)
class Settings:
    """Administrator-configured options."""

    first_day_of_week: int = DEFAULT_FIRST_DAY_OF_WEEK
    timesheet_recipients: str = ""
