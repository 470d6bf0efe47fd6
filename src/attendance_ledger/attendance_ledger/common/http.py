"""JSON helpers shared by the Flask controllers."""

from __future__ import annotations

from typing import Any, Iterable

from flask import jsonify, request

from ..attendance.model import AttendanceListRow, AttendanceRecord
from ..core.exceptions import DomainError
from ..reports.model import AttendanceSummary
from ..roster.model import Person
from .datetime_utils import format_date, format_datetime

STATUS_BY_KIND = {
    "invalid_input": 400,
    "not_found": 404,
    "person_not_found": 404,
    "conflict": 409,
    "storage_unavailable": 503,
}


def person_to_dict(p: Person) -> dict:
    return {
        "id": p.person_id,
        "external_id": p.external_id,
        "name": p.name,
        "contact": p.contact,
        "created_at": format_datetime(p.created_at),
    }


def record_to_dict(r: AttendanceRecord, *, external_id: str | None = None) -> dict:
    out = {
        "id": r.attendance_id,
        "person_id": r.person_id,
        "date": format_date(r.attendance_date),
        "status": r.status.value,
        "notes": r.notes,
        "created_at": format_datetime(r.created_at),
        "updated_at": format_datetime(r.updated_at),
    }
    if external_id is not None:
        out["external_id"] = external_id
    return out


def list_row_to_dict(r: AttendanceListRow) -> dict:
    return {
        "id": r.attendance_id,
        "external_id": r.external_id,
        "name": r.name,
        "date": format_date(r.attendance_date),
        "status": r.status.value,
        "notes": r.notes,
        "created_at": format_datetime(r.created_at),
        "updated_at": format_datetime(r.updated_at),
    }


def summary_to_dict(s: AttendanceSummary) -> dict:
    return {
        "external_id": s.external_id,
        "name": s.name,
        "present_count": s.present_count,
        "absent_count": s.absent_count,
        "late_count": s.late_count,
        "total_count": s.total_count,
        "attendance_percentage": s.attendance_percentage,
    }


def ok(data: Any, *, status: int = 200, **extra):
    body = {"success": True, **extra, "data": data}
    return jsonify(body), status


def ok_list(items: Iterable[dict], **extra):
    data = list(items)
    return ok(data, count=len(data), **extra)


def error_response(err: DomainError):
    status = STATUS_BY_KIND.get(err.kind, 400)
    body = {"success": False, "error": err.kind, "message": str(err)}
    field = getattr(err, "field", None)
    if field:
        body["field"] = field
    return jsonify(body), status


def read_payload() -> dict:
    """Request body as a dict: JSON object first, then form fields."""

    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()
