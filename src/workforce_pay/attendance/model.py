from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional

from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import AttendanceStatus, CheckedVia
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance on one day.

    Created at clock-in and replaced (never mutated in place) at clock-out.
    """

    employee_id: str
    work_date: date
    status: AttendanceStatus
    time_in: Optional[str] = None
    time_out: Optional[str] = None
    minutes_late: int = 0
    total_hours: float = 0.0
    overtime_hours: float = 0.0
    location: str = ""
    checked_via: CheckedVia = CheckedVia.MANUAL
    recorded_by: str = "system"
    note: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.time_in is not None and self.time_out is None

    @property
    def is_completed(self) -> bool:
        return self.time_in is not None and self.time_out is not None

    @classmethod
    def from_mapping(cls, row: Mapping) -> "AttendanceRecord":
        """Build a record from a raw storage row.

        Raises ValidationError (or its InvalidTimeFormat subclass) when the row
        is missing required fields or carries malformed values.
        """
        try:
            status = AttendanceStatus(row.get("status"))
            checked_via = CheckedVia(row.get("checked_via") or CheckedVia.MANUAL)
        except ValueError as e:
            raise ValidationError(str(e))

        time_in = row.get("time_in") or None
        time_out = row.get("time_out") or None
        for value in (time_in, time_out):
            if value is not None:
                parse_hhmm(value)

        return cls(
            employee_id=require_non_empty(row.get("employee_id"), "employee_id"),
            work_date=parse_iso_date(row.get("work_date") or row.get("date")),
            status=status,
            time_in=time_in,
            time_out=time_out,
            minutes_late=int(require_non_negative(row.get("minutes_late") or 0, "minutes_late")),
            total_hours=require_non_negative(row.get("total_hours") or 0, "total_hours"),
            overtime_hours=require_non_negative(row.get("overtime_hours") or 0, "overtime_hours"),
            location=row.get("location") or "",
            checked_via=checked_via,
            recorded_by=row.get("recorded_by") or "system",
            note=row.get("note") or None,
        )
