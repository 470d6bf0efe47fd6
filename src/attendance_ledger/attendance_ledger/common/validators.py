from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def optional_text(value: Optional[str], field_name: str, max_len: int) -> Optional[str]:
    """Normalize optional free text: empty or blank means "not given"."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    value = value.strip()
    if not value:
        return None
    return require_max_length(value, field_name, max_len)


def parse_status(value: Union[str, AttendanceStatus, None]) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("status is required")
    try:
        return AttendanceStatus(value.strip().lower())
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"status must be one of: {allowed}") from None


def optional_status(value: Union[str, AttendanceStatus, None]) -> Optional[AttendanceStatus]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_status(value)


def optional_date(value: Union[str, date, None], field_name: str) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if value is None or isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")
    value = value.strip()
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)") from None
