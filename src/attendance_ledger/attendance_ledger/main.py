from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import error_response
from .common.log_config import configure_logging
from .container import Container, build_container
from .core.exceptions import DomainError
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .reports.controller import register as register_reports
from .roster.controller import register as register_roster
from .system.controller import register as register_system

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(err: DomainError):
        return error_response(err)

    @app.errorhandler(404)
    def handle_not_found(_err):
        return jsonify({"success": False, "error": "Route not found", "path": request.path}), 404

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        if isinstance(err, HTTPException):
            return jsonify({"success": False, "error": err.name, "path": request.path}), err.code

        logger.exception("unhandled error on %s %s", request.method, request.path)
        message = str(err) if app.config.get("DEBUG") else "Something went wrong"
        return jsonify({"success": False, "error": "Internal server error", "message": message}), 500


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(db_config=db_config)

    app.extensions["attendance_ledger"] = container

    register_system(app, container)
    register_roster(app, container)
    register_attendance(app, container)
    register_reports(app, container)
    _register_error_handlers(app)

    return app
