from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from mysql.connector import errors

from ..core.constants import ER_NO_REFERENCED_ROW
from ..core.enums import AttendanceStatus
from ..core.exceptions import PersonNotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .filters import combine, person_predicates, record_predicates
from .model import AttendanceCounts, AttendanceListRow, AttendanceRecord, RecordFilter
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(
        self,
        *,
        person_id: int,
        attendance_date: date,
        status: AttendanceStatus,
        notes: Optional[str],
        now: datetime,
    ) -> AttendanceRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                # Single statement: the unique key (person_id, attendance_date) decides
                # between insert and update, so concurrent marks never duplicate a row.
                cur.execute(
                    """
                    INSERT INTO attendance_records(person_id, attendance_date, status, notes, created_at, updated_at)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    ON DUPLICATE KEY UPDATE status=VALUES(status), notes=VALUES(notes), updated_at=VALUES(updated_at)
                    """,
                    (int(person_id), attendance_date, status.value, notes, now, now),
                )

                # Same transaction still holds the row lock, so this reads our own write.
                cur.execute(
                    """
                    SELECT attendance_id, person_id, attendance_date, status, notes, created_at, updated_at
                    FROM attendance_records
                    WHERE person_id=%s AND attendance_date=%s
                    """,
                    (int(person_id), attendance_date),
                )
                r = fetchone(cur)
        except errors.IntegrityError as err:
            if err.errno == ER_NO_REFERENCED_ROW:
                raise PersonNotFoundError(person_id=int(person_id)) from err
            raise

        return AttendanceRecord(
            attendance_id=int(r["attendance_id"]),
            person_id=int(r["person_id"]),
            attendance_date=r["attendance_date"],
            status=AttendanceStatus(r["status"]),
            notes=r.get("notes"),
            created_at=r["created_at"],
            updated_at=r["updated_at"],
        )

    def list_records(self, record_filter: RecordFilter) -> Sequence[AttendanceListRow]:
        where, params = combine(
            person_predicates(external_id=record_filter.external_id, person_alias="p")
            + record_predicates(
                date_from=record_filter.date_from,
                date_to=record_filter.date_to,
                status=record_filter.status,
                record_alias="ar",
            )
        )

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    ar.attendance_id, p.external_id, p.name,
                    ar.attendance_date, ar.status, ar.notes, ar.created_at, ar.updated_at
                FROM attendance_records ar
                JOIN persons p ON p.person_id = ar.person_id
                WHERE {where}
                ORDER BY ar.attendance_date DESC, p.name ASC, ar.attendance_id ASC
                """,
                params,
            )
            rows = fetchall(cur)

        return [
            AttendanceListRow(
                attendance_id=int(r["attendance_id"]),
                external_id=r["external_id"],
                name=r["name"],
                attendance_date=r["attendance_date"],
                status=AttendanceStatus(r["status"]),
                notes=r.get("notes"),
                created_at=r["created_at"],
                updated_at=r["updated_at"],
            )
            for r in rows
        ]

    def count_by_person(
        self,
        *,
        external_id: Optional[str] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> Sequence[AttendanceCounts]:
        # Date bounds go into the JOIN so people without matching records keep their row.
        join_extra, join_params = combine(record_predicates(date_from=date_from, date_to=date_to, record_alias="ar"))
        where, where_params = combine(person_predicates(external_id=external_id, person_alias="p"))
        status_params = (AttendanceStatus.PRESENT.value, AttendanceStatus.ABSENT.value, AttendanceStatus.LATE.value)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    p.person_id, p.external_id, p.name,
                    COALESCE(SUM(ar.status=%s), 0) AS present_count,
                    COALESCE(SUM(ar.status=%s), 0) AS absent_count,
                    COALESCE(SUM(ar.status=%s), 0) AS late_count,
                    COUNT(ar.attendance_id) AS total_count
                FROM persons p
                LEFT JOIN attendance_records ar ON ar.person_id = p.person_id AND {join_extra}
                WHERE {where}
                GROUP BY p.person_id, p.external_id, p.name
                ORDER BY p.name ASC, p.person_id ASC
                """,
                status_params + join_params + where_params,
            )
            rows = fetchall(cur)

        return [
            AttendanceCounts(
                person_id=int(r["person_id"]),
                external_id=r["external_id"],
                name=r["name"],
                present_count=int(r["present_count"] or 0),
                absent_count=int(r["absent_count"] or 0),
                late_count=int(r["late_count"] or 0),
                total_count=int(r["total_count"] or 0),
            )
            for r in rows
        ]
