from __future__ import annotations

from ..shifts.calculator import shift_hours
from .model import Timesheet


def timesheet_total_hours(timesheet: Timesheet) -> str:
    """Sum of stored shift hours, formatted with two decimals."""
    if not timesheet.shifts:
        return "0.00"
    total = sum(shift_hours(shift) for shift in timesheet.shifts)
    return f"{total:.2f}"
