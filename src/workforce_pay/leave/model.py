from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import LeaveStatus, LeaveType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class LeaveRequest:
    """A leave request; whole-day leave sets days, partial-day leave sets hours."""

    employee_id: str
    start_date: date
    end_date: date
    type: LeaveType
    status: LeaveStatus
    total_days: float = 0
    total_hours: float = 0
    reason: str = ""

    @classmethod
    def from_mapping(cls, row: Mapping) -> "LeaveRequest":
        try:
            leave_type = LeaveType(row.get("type"))
            status = LeaveStatus(row.get("status", LeaveStatus.PENDING))
        except ValueError as e:
            raise ValidationError(str(e))

        start = parse_iso_date(row.get("start_date"))
        end = parse_iso_date(row.get("end_date") or start)
        if end < start:
            raise ValidationError("Leave end date must not be before its start date")

        return cls(
            employee_id=require_non_empty(row.get("employee_id"), "employee_id"),
            start_date=start,
            end_date=end,
            type=leave_type,
            status=status,
            total_days=require_non_negative(row.get("total_days") or 0, "total_days"),
            total_hours=require_non_negative(row.get("total_hours") or 0, "total_hours"),
            reason=row.get("reason") or "",
        )
