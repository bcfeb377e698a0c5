from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from flask import Flask, jsonify, request

from ..common.datetime_utils import formatted_date, long_format_date, now_local, parse_iso_date
from ..common.validators import parse_int, require_mapping
from ..container import Container
from ..core.exceptions import FormValidationError
from ..shifts.calculator import shift_hours, shift_hours_from_times
from ..shifts.model import Shift, ShiftTimesInput
from .calculator import timesheet_total_hours
from .model import Timesheet
from .service import parse_shift_entries


def _shift_json(shift: Shift) -> dict:
    return {
        "start": shift.start.isoformat(),
        "end": shift.end.isoformat(),
        "breakDuration": shift.break_duration,
        "hours": round(shift_hours(shift), 2),
        "day": long_format_date(shift.start),
    }


def _timesheet_json(timesheet: Timesheet) -> dict:
    return {
        "id": timesheet.timesheet_id,
        "userID": timesheet.user_id,
        "shifts": [_shift_json(s) for s in timesheet.shifts or ()],
        "totalHours": timesheet_total_hours(timesheet),
    }


def _json_body() -> Mapping[str, Any]:
    return require_mapping(request.get_json(silent=True) or {}, "body")


def _date_arg(name: str) -> date:
    value = request.args.get(name)
    if not value:
        return now_local().date()
    try:
        return parse_iso_date(value)
    except ValueError:
        raise FormValidationError({name: "Date must be formatted as YYYY-MM-DD"}) from None


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shift-hours", methods=["POST"], endpoint="shift_hours")
    def shift_hours_view():
        times = ShiftTimesInput.from_form(_json_body())
        return jsonify({"hours": shift_hours_from_times(times), "times": times.to_form()})

    @app.route("/api/week", methods=["GET"], endpoint="week")
    def week_view():
        on = _date_arg("date")
        week = container.timesheet_service.week(on)
        return jsonify(
            {
                "firstDayOfWeek": container.settings_service.first_day_of_week(),
                "start": week.start.isoformat(),
                "end": week.end.isoformat(),
                "days": [
                    {"date": d.isoformat(), "label": long_format_date(d), "short": formatted_date(d)}
                    for d in container.timesheet_service.week_days(on)
                ],
            }
        )

    @app.route("/api/timesheets", methods=["GET"], endpoint="timesheet_list")
    def timesheet_list():
        user_id = request.args.get("userID", type=int)
        if user_id is None:
            raise FormValidationError({"userID": "userID is required"})
        items = container.timesheet_service.list_for_week(user_id=user_id, on=_date_arg("date"))
        return jsonify([_timesheet_json(t) for t in items])

    @app.route("/api/timesheets", methods=["POST"], endpoint="timesheet_create")
    def timesheet_create():
        data = _json_body()
        user_id = parse_int(data.get("userID"))
        if user_id is None:
            raise FormValidationError({"userID": "userID must be an integer"})
        entries = parse_shift_entries(data.get("shifts") or [])
        timesheet_id = container.timesheet_service.create(user_id=user_id, entries=entries)
        return jsonify(_timesheet_json(container.timesheet_service.get(timesheet_id))), 201

    @app.route("/api/timesheets/<int:timesheet_id>", methods=["GET"], endpoint="timesheet_view")
    def timesheet_view(timesheet_id: int):
        return jsonify(_timesheet_json(container.timesheet_service.get(timesheet_id)))

    @app.route("/api/timesheets/<int:timesheet_id>", methods=["PUT"], endpoint="timesheet_replace")
    def timesheet_replace(timesheet_id: int):
        data = _json_body()
        entries = parse_shift_entries(data.get("shifts") or [])
        timesheet = container.timesheet_service.replace(timesheet_id=timesheet_id, entries=entries)
        return jsonify(_timesheet_json(timesheet))
