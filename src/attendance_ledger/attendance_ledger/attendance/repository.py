from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceCounts, AttendanceListRow, AttendanceRecord, RecordFilter


class AttendanceRepository(Protocol):
    def upsert(
        self,
        *,
        person_id: int,
        attendance_date: date,
        status: AttendanceStatus,
        notes: Optional[str],
        now: datetime,
    ) -> AttendanceRecord:
        """Insert or overwrite the record for (person_id, attendance_date) atomically.

        Returns the record as stored after the write.
        """

        raise NotImplementedError

    def list_records(self, record_filter: RecordFilter) -> Sequence[AttendanceListRow]:
        """Rows matching every set option, newest date first, then by name and id."""

        raise NotImplementedError

    def count_by_person(
        self,
        *,
        external_id: Optional[str] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> Sequence[AttendanceCounts]:
        """Per-person status counts over one consistent read.

        Every roster person (restricted by external_id when given) gets a row, even
        with no records in the date range. Ordered by name, then person_id.
        """

        raise NotImplementedError
