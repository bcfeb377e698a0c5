from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.validators import is_email_list, is_weekday_index, parse_int, require_mapping
from ..core.exceptions import FormValidationError
from .model import Settings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


def validate_settings(values: Mapping[str, Any]) -> Settings:
    """Turn submitted `firstDayOfWeek` / `timesheetRecipients` into Settings."""
    values = require_mapping(values, "body")
    first_day = values.get("firstDayOfWeek")
    recipients = values.get("timesheetRecipients")
    errors = {}

    if not is_weekday_index(first_day):
        errors["firstDayOfWeek"] = "Selection is not valid"
    if not is_email_list(recipients):
        errors["timesheetRecipients"] = "Must be a valid list of emails, separated by a comma"
    if errors:
        raise FormValidationError(errors)

    return Settings(first_day_of_week=parse_int(first_day), timesheet_recipients=recipients.strip())


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self) -> Settings:
        return self._settings.get()

    def first_day_of_week(self) -> int:
        return self._settings.get().first_day_of_week

    def update(self, values: Mapping[str, Any]) -> Settings:
        settings = validate_settings(values)
        self._settings.save(settings)
        logger.info("Settings updated: first day of week=%s", settings.first_day_of_week)
        return settings
