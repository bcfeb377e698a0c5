from __future__ import annotations

from dataclasses import dataclass

from .common.validators import is_weekday_index
from .core.exceptions import ValidationError
from .settings.memory_repository import InMemorySettingsRepository
from .settings.model import Settings
from .settings.service import SettingsService
from .timesheets.memory_repository import InMemoryTimesheetRepository
from .timesheets.service import TimesheetService


@dataclass(frozen=True)
class Container:
    timesheets_repo: InMemoryTimesheetRepository
    settings_repo: InMemorySettingsRepository

    settings_service: SettingsService
    timesheet_service: TimesheetService


def build_container(*, first_day_of_week: int, timesheet_recipients: str = "") -> Container:
    if not is_weekday_index(first_day_of_week):
        raise ValidationError(f"FIRST_DAY_OF_WEEK must be between 0 and 6, got {first_day_of_week!r}")

    timesheets_repo = InMemoryTimesheetRepository()
    settings_repo = InMemorySettingsRepository(
        Settings(first_day_of_week=int(first_day_of_week), timesheet_recipients=timesheet_recipients)
    )

    settings_service = SettingsService(settings_repo)
    timesheet_service = TimesheetService(timesheets_repo, settings_service)

    return Container(
        timesheets_repo=timesheets_repo,
        settings_repo=settings_repo,
        settings_service=settings_service,
        timesheet_service=timesheet_service,
    )
