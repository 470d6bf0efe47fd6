from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional, Sequence, Union

from ..common.datetime_utils import now_local
from ..common.validators import optional_date, optional_status, optional_text, parse_status, require_non_empty
from ..core.constants import MAX_NOTES_LENGTH
from ..core.enums import AttendanceStatus
from ..core.exceptions import PersonNotFoundError
from ..roster.repository import RosterRepository
from .model import AttendanceListRow, AttendanceRecord, RecordFilter
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

DateLike = Union[date, str, None]
StatusLike = Union[AttendanceStatus, str, None]


def build_record_filter(
    *,
    external_id: Optional[str] = None,
    date_from: DateLike = None,
    date_to: DateLike = None,
    status: StatusLike = None,
) -> RecordFilter:
    """Normalize raw listing options; blank values mean "no restriction"."""

    if external_id is not None:
        external_id = external_id.strip() or None
    return RecordFilter(
        external_id=external_id,
        date_from=optional_date(date_from, "date_from"),
        date_to=optional_date(date_to, "date_to"),
        status=optional_status(status),
    )


class AttendanceService:
    """Use case: mark a day's status per person and list the ledger."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        persons: RosterRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._persons = persons
        self._clock = clock

    def mark(
        self,
        *,
        external_id: str,
        status: StatusLike,
        attendance_date: DateLike = None,
        notes: Optional[str] = None,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        now = now or self._clock()

        external_id = require_non_empty(external_id, "external_id")
        status = parse_status(status)
        attendance_date = optional_date(attendance_date, "date") or now.date()
        notes = optional_text(notes, "notes", MAX_NOTES_LENGTH)

        person = self._persons.get_by_external_id(external_id)
        if not person:
            raise PersonNotFoundError(external_id)

        record = self._attendance.upsert(
            person_id=person.person_id,
            attendance_date=attendance_date,
            status=status,
            notes=notes,
            now=now,
        )
        logger.info(
            "attendance marked: external_id=%s date=%s status=%s",
            external_id,
            attendance_date.isoformat(),
            status.value,
        )
        return record

    def list_records(self, record_filter: RecordFilter | None = None) -> Sequence[AttendanceListRow]:
        return self._attendance.list_records(record_filter or RecordFilter())
