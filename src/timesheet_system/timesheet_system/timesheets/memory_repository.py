from __future__ import annotations

from typing import Optional, Sequence

from ..shifts.model import Shift
from .model import Timesheet
from .repository import TimesheetRepository


class InMemoryTimesheetRepository(TimesheetRepository):
    """Process-local store; storage proper lives outside this package."""

    def __init__(self):
        self._by_id: dict[int, Timesheet] = {}
        self._next_id = 1

    def create(self, *, user_id: int, shifts: Sequence[Shift]) -> int:
        timesheet_id = self._next_id
        self._next_id += 1
        self._by_id[timesheet_id] = Timesheet(timesheet_id=timesheet_id, user_id=int(user_id), shifts=tuple(shifts))
        return timesheet_id

    def replace_shifts(self, *, timesheet_id: int, shifts: Sequence[Shift]) -> bool:
        current = self._by_id.get(int(timesheet_id))
        if not current:
            return False
        self._by_id[current.timesheet_id] = Timesheet(
            timesheet_id=current.timesheet_id,
            user_id=current.user_id,
            shifts=tuple(shifts),
        )
        return True

    def get_by_id(self, timesheet_id: int) -> Optional[Timesheet]:
        return self._by_id.get(int(timesheet_id))

    def list_for_user(self, user_id: int) -> Sequence[Timesheet]:
        return [t for t in self._by_id.values() if t.user_id == int(user_id)]
