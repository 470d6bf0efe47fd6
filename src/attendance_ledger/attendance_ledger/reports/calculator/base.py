from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...attendance.model import AttendanceCounts


class AttendanceRateCalculator(ABC):
    """Calculator interface (Strategy Pattern for attendance rates)."""

    @abstractmethod
    def percentage(self, counts: AttendanceCounts) -> Optional[float]:
        """Rate in percent, or None when there is nothing to divide by."""

        raise NotImplementedError
