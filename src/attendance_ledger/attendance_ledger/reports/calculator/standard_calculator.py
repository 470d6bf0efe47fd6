from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ...attendance.model import AttendanceCounts
from ...core.constants import PERCENTAGE_PLACES
from .base import AttendanceRateCalculator

_QUANTUM = Decimal(1).scaleb(-PERCENTAGE_PLACES)


class StandardAttendanceRateCalculator(AttendanceRateCalculator):
    """Standard rule: present / total * 100, half-up to two places; None when total is 0."""

    def percentage(self, counts: AttendanceCounts) -> Optional[float]:
        if counts.total_count <= 0:
            return None
        rate = Decimal(counts.present_count) * 100 / Decimal(counts.total_count)
        return float(rate.quantize(_QUANTUM, rounding=ROUND_HALF_UP))
