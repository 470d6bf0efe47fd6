from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import AttendanceSummaryService
from .roster.mysql_roster_repository import MySQLRosterRepository
from .roster.repository import RosterRepository
from .roster.service import RosterService
from .system.service import HealthService


@dataclass(frozen=True)
class Container:
    roster_repo: RosterRepository
    attendance_repo: AttendanceRepository

    roster_service: RosterService
    attendance_service: AttendanceService
    summary_service: AttendanceSummaryService
    health_service: HealthService

    db: Optional[DatabaseConnection] = None


def build_services(
    *,
    roster_repo: RosterRepository,
    attendance_repo: AttendanceRepository,
    health_service: HealthService,
    db: Optional[DatabaseConnection] = None,
) -> Container:
    return Container(
        roster_repo=roster_repo,
        attendance_repo=attendance_repo,
        roster_service=RosterService(roster_repo),
        attendance_service=AttendanceService(attendance_repo, roster_repo),
        summary_service=AttendanceSummaryService(attendance_repo),
        health_service=health_service,
        db=db,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return build_services(
        db=conn,
        roster_repo=MySQLRosterRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        health_service=HealthService(conn),
    )
