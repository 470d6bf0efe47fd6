from __future__ import annotations

from flask import Flask, request

from ..common.http import error_response, ok_list, summary_to_dict
from ..core.exceptions import DomainError
from ..container import Container
from .service import build_summary_filter


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/stats", methods=["GET"], endpoint="attendance_stats")
    def attendance_stats():
        args = request.args
        try:
            summary_filter = build_summary_filter(
                external_id=args.get("external_id"),
                date_from=args.get("date_from"),
                date_to=args.get("date_to"),
            )
            summaries = container.summary_service.summarize(summary_filter)
        except DomainError as e:
            return error_response(e)
        return ok_list(summary_to_dict(s) for s in summaries)
