from __future__ import annotations

from datetime import datetime

from flask import Flask, jsonify

from .. import __version__
from ..common.datetime_utils import format_datetime
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return jsonify(
            {
                "message": "Attendance Ledger API",
                "version": __version__,
                "endpoints": {
                    "health": "/api/health",
                    "people": "/api/people",
                    "attendance": "/api/attendance",
                    "records": "/api/attendance/records",
                    "stats": "/api/attendance/stats",
                },
            }
        )

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        status = container.health_service.check()
        body = {
            "status": "healthy" if status.healthy else "unhealthy",
            "timestamp": format_datetime(datetime.now()),
            "database": "connected" if status.healthy else "disconnected",
        }
        if status.healthy:
            body["db_time"] = format_datetime(status.db_time)
            return jsonify(body), 200
        body["error"] = status.error
        return jsonify(body), 503
