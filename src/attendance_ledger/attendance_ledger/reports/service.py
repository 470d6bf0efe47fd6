from __future__ import annotations

from datetime import date
from typing import Optional, Sequence, Union

from ..attendance.repository import AttendanceRepository
from ..common.validators import optional_date
from .calculator.base import AttendanceRateCalculator
from .calculator.standard_calculator import StandardAttendanceRateCalculator
from .model import AttendanceSummary, SummaryFilter


def build_summary_filter(
    *,
    external_id: Optional[str] = None,
    date_from: Union[date, str, None] = None,
    date_to: Union[date, str, None] = None,
) -> SummaryFilter:
    if external_id is not None:
        external_id = external_id.strip() or None
    return SummaryFilter(
        external_id=external_id,
        date_from=optional_date(date_from, "date_from"),
        date_to=optional_date(date_to, "date_to"),
    )


class AttendanceSummaryService:
    """Read-only per-person attendance statistics derived from the ledger."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[AttendanceRateCalculator] = None,
    ):
        self._attendance = attendance
        self._calculator = calculator or StandardAttendanceRateCalculator()

    def summarize(self, summary_filter: SummaryFilter | None = None) -> Sequence[AttendanceSummary]:
        summary_filter = summary_filter or SummaryFilter()
        counts = self._attendance.count_by_person(
            external_id=summary_filter.external_id,
            date_from=summary_filter.date_from,
            date_to=summary_filter.date_to,
        )

        return [
            AttendanceSummary(
                external_id=c.external_id,
                name=c.name,
                present_count=c.present_count,
                absent_count=c.absent_count,
                late_count=c.late_count,
                total_count=c.total_count,
                attendance_percentage=self._calculator.percentage(c),
            )
            for c in counts
        ]
