from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from config import get_settings_module

from .container import build_container
from .core.exceptions import FormValidationError, NotFoundError, ValidationError
from .settings.controller import register as register_settings
from .timesheets.controller import register as register_timesheets

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        errors = e.errors if isinstance(e, FormValidationError) else {}
        logger.debug("Rejected %s %s: %s", request.method, request.path, e)
        return jsonify({"error": str(e), "errors": errors}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    first_day_of_week = getattr(settings, "FIRST_DAY_OF_WEEK", 1)
    container = build_container(
        first_day_of_week=first_day_of_week,
        timesheet_recipients=getattr(settings, "TIMESHEET_RECIPIENTS", ""),
    )
    logger.info("settings=%s first_day_of_week=%s", settings_module, first_day_of_week)

    register_error_handlers(app)
    register_timesheets(app, container)
    register_settings(app, container)

    return app
