from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..shifts.model import Shift
from .model import Timesheet


class TimesheetRepository(Protocol):
    def create(self, *, user_id: int, shifts: Sequence[Shift]) -> int:
        raise NotImplementedError

    def replace_shifts(self, *, timesheet_id: int, shifts: Sequence[Shift]) -> bool:
        raise NotImplementedError

    def get_by_id(self, timesheet_id: int) -> Optional[Timesheet]:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[Timesheet]:
        raise NotImplementedError
