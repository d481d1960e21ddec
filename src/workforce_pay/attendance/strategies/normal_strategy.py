from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """Check-in within the lateness threshold."""

    def decide_checkin(self, *, minutes_late: int, threshold_minutes: int) -> StatusDecision:
        note = f"{minutes_late} min after shift start (within {threshold_minutes} min)" if minutes_late else None
        return StatusDecision(status=AttendanceStatus.PRESENT, note=note)
