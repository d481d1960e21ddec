from __future__ import annotations

from dataclasses import dataclass

from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_checkin(self, *, minutes_late: int, threshold_minutes: int) -> AttendanceStrategy:
        # Strictly greater: arriving exactly on the threshold is still on time.
        if minutes_late > threshold_minutes:
            return LateStrategy()
        return NormalStrategy()
