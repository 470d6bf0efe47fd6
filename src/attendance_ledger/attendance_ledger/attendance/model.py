from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one day's status for one person."""

    attendance_id: int
    person_id: int
    attendance_date: date
    status: AttendanceStatus
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class AttendanceListRow:
    """Read-model for listings: a record joined with its person's name and external id."""

    attendance_id: int
    external_id: str
    name: str
    attendance_date: date
    status: AttendanceStatus
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class RecordFilter:
    """Options for listing records. Every field is optional; set fields are ANDed."""

    external_id: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    status: Optional[AttendanceStatus] = None


@dataclass(frozen=True)
class AttendanceCounts:
    """Read-model for aggregation: status counts for one roster person."""

    person_id: int
    external_id: str
    name: str
    present_count: int
    absent_count: int
    late_count: int
    total_count: int
