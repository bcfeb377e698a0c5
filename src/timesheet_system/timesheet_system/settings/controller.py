from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import weekday_name
from ..common.validators import require_mapping
from ..container import Container
from .model import Settings


def _settings_json(settings: Settings) -> dict:
    return {
        "firstDayOfWeek": settings.first_day_of_week,
        "firstDayOfWeekName": weekday_name(settings.first_day_of_week),
        "timesheetRecipients": settings.timesheet_recipients,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings", methods=["GET"], endpoint="settings_view")
    def settings_view():
        return jsonify(_settings_json(container.settings_service.get()))

    @app.route("/api/settings", methods=["PUT"], endpoint="settings_update")
    def settings_update():
        settings = container.settings_service.update(require_mapping(request.get_json(silent=True) or {}, "body"))
        return jsonify(_settings_json(settings))
