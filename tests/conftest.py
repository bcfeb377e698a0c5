from __future__ import annotations

from datetime import datetime

import pytest

from src.timesheet_system.timesheet_system.main import create_app
from src.timesheet_system.timesheet_system.settings.memory_repository import InMemorySettingsRepository
from src.timesheet_system.timesheet_system.settings.model import Settings
from src.timesheet_system.timesheet_system.settings.service import SettingsService
from src.timesheet_system.timesheet_system.timesheets.memory_repository import InMemoryTimesheetRepository
from src.timesheet_system.timesheet_system.timesheets.service import TimesheetService


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday
    return datetime(2025, 3, 5, 8, 45)


@pytest.fixture
def settings_service() -> SettingsService:
    return SettingsService(InMemorySettingsRepository(Settings(first_day_of_week=1, timesheet_recipients="a@example.com")))


@pytest.fixture
def timesheet_service(settings_service) -> TimesheetService:
    return TimesheetService(InMemoryTimesheetRepository(), settings_service)


@pytest.fixture
def client():
    app = create_app("config.testing")
    return app.test_client()
