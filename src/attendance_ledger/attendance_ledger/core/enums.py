from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Closed set of statuses stored per person per day."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
