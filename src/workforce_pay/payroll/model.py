from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Optional

from ..core.enums import OvertimeTier


@dataclass(frozen=True)
class DailyPay:
    """One day's pay at full precision; rounding happens on the monthly record."""

    regular_pay: float
    overtime_pay: float
    meal_allowance: float
    total_pay: float
    regular_hours: float
    overtime_hours: float
    applied_tier: OvertimeTier
    extended_hours: float = 0.0


@dataclass(frozen=True)
class PayrollRecord:
    """Read-model of one employee's pay for one calendar month."""

    employee_id: str
    name: str
    position: str
    department: str
    month: int
    year: int
    regular_hours: float
    overtime_hours: float
    regular_pay: float
    overtime_pay: float
    meal_allowance: float
    transport_allowance: float
    leave_deduction: float
    base_salary: float
    adjusted_base_salary: float
    total_pay: float
    days_present: int
    days_late: int
    days_absent: int
    days_on_leave: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PayrollIssue:
    """A record left out of (or only partly counted in) an aggregation."""

    employee_id: str
    work_date: Optional[date]
    kind: str
    message: str


@dataclass(frozen=True)
class PayrollResult:
    record: PayrollRecord
    issues: tuple[PayrollIssue, ...] = ()
    skipped_records: int = 0

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)
