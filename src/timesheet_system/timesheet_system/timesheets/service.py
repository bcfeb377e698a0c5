from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_list
from ..core.exceptions import FormValidationError, NotFoundError
from ..settings.service import SettingsService
from ..shifts.model import Shift, ShiftTimesInput
from ..weeks.calculator import week_bounds
from ..weeks.model import WeekRange
from .calculator import timesheet_total_hours
from .model import ShiftEntry, Timesheet
from .repository import TimesheetRepository

logger = logging.getLogger(__name__)


def parse_shift_entries(rows: Sequence[Mapping[str, Any]]) -> list[ShiftEntry]:
    """Parse submitted form rows (`date`, `startTime`, `endTime`, `breakDuration`).

    Errors from every row are collected, keyed as `shifts[i].field`.
    """
    rows = require_list(rows, "shifts")
    entries = []
    errors = {}
    for i, row in enumerate(rows):
        if not isinstance(row, Mapping):
            errors[f"shifts[{i}]"] = "Must be an object"
            continue
        day = row.get("date")
        if isinstance(day, str):
            try:
                day = parse_iso_date(day)
            except ValueError:
                day = None
        if isinstance(day, datetime):
            day = day.date()
        if not isinstance(day, date):
            errors[f"shifts[{i}].date"] = "Date must be formatted as YYYY-MM-DD"

        try:
            times = ShiftTimesInput.from_form(row)
        except FormValidationError as e:
            errors.update({f"shifts[{i}].{k}": v for k, v in e.errors.items()})
            continue

        if isinstance(day, date):
            entries.append(ShiftEntry(day=day, times=times))

    if errors:
        raise FormValidationError(errors)
    return entries


class TimesheetService:
    def __init__(self, timesheets: TimesheetRepository, settings: SettingsService):
        self._timesheets = timesheets
        self._settings = settings

    @staticmethod
    def build_shifts(entries: Sequence[ShiftEntry]) -> list[Shift]:
        """Derive stored shifts from form rows.

        Rows left completely blank are skipped; partially filled rows are
        rejected.
        """
        shifts = []
        errors = {}
        for entry in entries:
            if entry.times.is_empty():
                continue
            if not entry.times.is_complete():
                errors[entry.day.isoformat()] = "Start, end and break are all required"
                continue
            shifts.append(entry.times.to_shift(entry.day))
        if errors:
            raise FormValidationError(errors)

        shifts.sort(key=lambda s: s.start)
        return shifts

    def create(self, *, user_id: int, entries: Sequence[ShiftEntry]) -> int:
        shifts = self.build_shifts(entries)
        timesheet_id = self._timesheets.create(user_id=int(user_id), shifts=shifts)
        logger.info("Timesheet %s created for user %s with %d shifts", timesheet_id, user_id, len(shifts))
        return timesheet_id

    def replace(self, *, timesheet_id: int, entries: Sequence[ShiftEntry]) -> Timesheet:
        shifts = self.build_shifts(entries)
        if not self._timesheets.replace_shifts(timesheet_id=int(timesheet_id), shifts=shifts):
            raise NotFoundError(f"Timesheet {timesheet_id} not found")
        logger.info("Timesheet %s re-saved with %d shifts", timesheet_id, len(shifts))
        return self.get(timesheet_id)

    def get(self, timesheet_id: int) -> Timesheet:
        timesheet = self._timesheets.get_by_id(int(timesheet_id))
        if not timesheet:
            raise NotFoundError(f"Timesheet {timesheet_id} not found")
        return timesheet

    def total_hours(self, timesheet_id: int) -> str:
        return timesheet_total_hours(self.get(timesheet_id))

    def week(self, on: date) -> WeekRange:
        return week_bounds(on, self._settings.first_day_of_week())

    def week_days(self, on: date) -> list[date]:
        return [d.date() for d in self.week(on).days()]

    def list_for_week(self, *, user_id: int, on: date) -> list[Timesheet]:
        """Timesheets whose first shift starts inside the week of `on`."""
        week = self.week(on)
        items = [t for t in self._timesheets.list_for_user(int(user_id)) if t.shifts and week.contains(t.shifts[0].start)]
        items.sort(key=lambda t: t.timesheet_id)
        return items

