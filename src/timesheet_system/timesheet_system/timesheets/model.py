from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..shifts.model import Shift, ShiftTimesInput


@dataclass(frozen=True)
class Timesheet:
    """Ordered shifts submitted by one user.

    Shifts are only ever replaced as a whole; `shifts` is None when the
    record came back from storage without any.
    """

    timesheet_id: int
    user_id: int
    shifts: Optional[tuple[Shift, ...]] = ()


@dataclass(frozen=True)
class ShiftEntry:
    """One row of the timesheet form: a calendar day and its clock times."""

    day: date
    times: ShiftTimesInput
