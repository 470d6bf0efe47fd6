from __future__ import annotations

from flask import Flask, request

from ..common.http import error_response, list_row_to_dict, ok, ok_list, read_payload, record_to_dict
from ..core.exceptions import DomainError
from ..container import Container
from .service import build_record_filter


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_mark")
    def attendance_mark():
        payload = read_payload()
        try:
            record = container.attendance_service.mark(
                external_id=payload.get("external_id"),
                status=payload.get("status"),
                attendance_date=payload.get("date"),
                notes=payload.get("notes"),
            )
        except DomainError as e:
            return error_response(e)
        return ok(
            record_to_dict(record, external_id=str(payload.get("external_id")).strip()),
            status=201,
            message="Attendance marked successfully",
        )

    @app.route("/api/attendance/records", methods=["GET"], endpoint="attendance_records")
    def attendance_records():
        args = request.args
        filters = {
            "external_id": args.get("external_id"),
            "date_from": args.get("date_from"),
            "date_to": args.get("date_to"),
            "status": args.get("status"),
        }
        try:
            rows = container.attendance_service.list_records(build_record_filter(**filters))
        except DomainError as e:
            return error_response(e)
        return ok_list((list_row_to_dict(r) for r in rows), filters=filters)
