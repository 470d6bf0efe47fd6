from __future__ import annotations

import threading
from datetime import date, datetime
from typing import Optional

import pytest

from src.attendance_ledger.attendance_ledger.attendance.model import (
    AttendanceCounts,
    AttendanceListRow,
    AttendanceRecord,
    RecordFilter,
)
from src.attendance_ledger.attendance_ledger.attendance.service import AttendanceService
from src.attendance_ledger.attendance_ledger.core.enums import AttendanceStatus
from src.attendance_ledger.attendance_ledger.core.exceptions import ConflictError
from src.attendance_ledger.attendance_ledger.reports.service import AttendanceSummaryService
from src.attendance_ledger.attendance_ledger.roster.model import Person
from src.attendance_ledger.attendance_ledger.roster.service import RosterService

FIXED_NOW = datetime(2025, 3, 1, 9, 30, 0)


class InMemoryRoster:
    def __init__(self):
        self._by_id: dict[int, Person] = {}
        self._id = 0
        self._lock = threading.Lock()

    def create_person(self, *, external_id: str, name: str, contact: str, created_at: datetime) -> Person:
        with self._lock:
            for p in self._by_id.values():
                if p.external_id == external_id:
                    raise ConflictError("A person with this external_id already exists", field="external_id")
                if p.contact == contact:
                    raise ConflictError("A person with this contact already exists", field="contact")
            self._id += 1
            person = Person(
                person_id=self._id,
                external_id=external_id,
                name=name,
                contact=contact,
                created_at=created_at,
            )
            self._by_id[person.person_id] = person
            return person

    def get_by_external_id(self, external_id: str) -> Optional[Person]:
        for p in self._by_id.values():
            if p.external_id == external_id:
                return p
        return None

    def get_by_id(self, person_id: int) -> Optional[Person]:
        return self._by_id.get(person_id)

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda p: (p.name, p.person_id))


class InMemoryAttendance:
    """Keyed by (person_id, date); the lock stands in for the store's atomic upsert."""

    def __init__(self, roster: InMemoryRoster):
        self._roster = roster
        self._by_key: dict[tuple[int, date], AttendanceRecord] = {}
        self._id = 0
        self._lock = threading.Lock()
        self.upsert_calls = 0

    def upsert(self, *, person_id, attendance_date, status, notes, now) -> AttendanceRecord:
        with self._lock:
            self.upsert_calls += 1
            existing = self._by_key.get((person_id, attendance_date))
            if existing:
                rec = AttendanceRecord(
                    attendance_id=existing.attendance_id,
                    person_id=person_id,
                    attendance_date=attendance_date,
                    status=status,
                    notes=notes,
                    created_at=existing.created_at,
                    updated_at=now,
                )
            else:
                self._id += 1
                rec = AttendanceRecord(
                    attendance_id=self._id,
                    person_id=person_id,
                    attendance_date=attendance_date,
                    status=status,
                    notes=notes,
                    created_at=now,
                    updated_at=now,
                )
            self._by_key[(person_id, attendance_date)] = rec
            return rec

    def all_records(self) -> list[AttendanceRecord]:
        return list(self._by_key.values())

    def _matches(self, rec: AttendanceRecord, *, date_from=None, date_to=None, status=None) -> bool:
        if date_from is not None and rec.attendance_date < date_from:
            return False
        if date_to is not None and rec.attendance_date > date_to:
            return False
        if status is not None and rec.status != status:
            return False
        return True

    def list_records(self, record_filter: RecordFilter):
        rows = []
        for rec in self._by_key.values():
            person = self._roster.get_by_id(rec.person_id)
            if record_filter.external_id is not None and person.external_id != record_filter.external_id:
                continue
            if not self._matches(
                rec,
                date_from=record_filter.date_from,
                date_to=record_filter.date_to,
                status=record_filter.status,
            ):
                continue
            rows.append(
                AttendanceListRow(
                    attendance_id=rec.attendance_id,
                    external_id=person.external_id,
                    name=person.name,
                    attendance_date=rec.attendance_date,
                    status=rec.status,
                    notes=rec.notes,
                    created_at=rec.created_at,
                    updated_at=rec.updated_at,
                )
            )
        rows.sort(key=lambda r: r.attendance_id)
        rows.sort(key=lambda r: r.name)
        rows.sort(key=lambda r: r.attendance_date, reverse=True)
        return rows

    def count_by_person(self, *, external_id=None, date_from=None, date_to=None):
        out = []
        for person in self._roster.list_all():
            if external_id is not None and person.external_id != external_id:
                continue
            recs = [
                r
                for r in self._by_key.values()
                if r.person_id == person.person_id and self._matches(r, date_from=date_from, date_to=date_to)
            ]
            out.append(
                AttendanceCounts(
                    person_id=person.person_id,
                    external_id=person.external_id,
                    name=person.name,
                    present_count=sum(1 for r in recs if r.status == AttendanceStatus.PRESENT),
                    absent_count=sum(1 for r in recs if r.status == AttendanceStatus.ABSENT),
                    late_count=sum(1 for r in recs if r.status == AttendanceStatus.LATE),
                    total_count=len(recs),
                )
            )
        return out


@pytest.fixture
def roster_repo() -> InMemoryRoster:
    return InMemoryRoster()


@pytest.fixture
def attendance_repo(roster_repo) -> InMemoryAttendance:
    return InMemoryAttendance(roster_repo)


@pytest.fixture
def roster_service(roster_repo) -> RosterService:
    return RosterService(roster_repo, clock=lambda: FIXED_NOW)


@pytest.fixture
def attendance_service(attendance_repo, roster_repo) -> AttendanceService:
    return AttendanceService(attendance_repo, roster_repo, clock=lambda: FIXED_NOW)


@pytest.fixture
def summary_service(attendance_repo) -> AttendanceSummaryService:
    return AttendanceSummaryService(attendance_repo)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
