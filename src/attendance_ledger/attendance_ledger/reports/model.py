from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class SummaryFilter:
    """Options for summarizing. Every field is optional; there is no status option."""

    external_id: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None


@dataclass(frozen=True)
class AttendanceSummary:
    external_id: str
    name: str
    present_count: int
    absent_count: int
    late_count: int
    total_count: int
    attendance_percentage: Optional[float]
