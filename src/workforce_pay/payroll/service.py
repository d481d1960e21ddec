from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Iterable, Mapping, Optional, Sequence, Union

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import parse_iso_date
from ..common.money import round2
from ..core.enums import AttendanceStatus, LeaveStatus, TransportDayBasis
from ..core.exceptions import DomainError, ValidationError
from ..employees.model import Employee
from ..holidays.model import Holiday
from ..leave.model import LeaveRequest
from .calculator.base import PayCalculator
from .calculator.leave import LeaveDeductionCalculator
from .calculator.salary import resolve_monthly_salary
from .calculator.standard_calculator import StandardPayCalculator
from .calculator.transport import TransportAllowanceCalculator
from .config import DEFAULT_CONFIG, PayrollConfig
from .model import PayrollIssue, PayrollRecord, PayrollResult

logger = logging.getLogger(__name__)

AttendanceInput = Union[AttendanceRecord, Mapping]
LeaveInput = Union[LeaveRequest, Mapping]
HolidayInput = Union[Holiday, Mapping]

_ATTENDANCE_DATE_KEYS = ("work_date", "date")
_LEAVE_DATE_KEYS = ("start_date",)
_HOLIDAY_DATE_KEYS = ("holiday_date", "date")


@dataclass
class _Totals:
    regular_pay: float = 0.0
    overtime_pay: float = 0.0
    meal_allowance: float = 0.0
    regular_hours: float = 0.0
    overtime_hours: float = 0.0
    leave_deduction: float = 0.0
    days_present: int = 0
    days_late: int = 0
    days_absent: int = 0
    days_on_leave: int = 0
    days_recorded: int = 0
    skipped: int = 0
    issues: list[PayrollIssue] = field(default_factory=list)


def _sort_key(record: AttendanceRecord):
    return (record.work_date, record.time_in or "", record.time_out or "", record.status.value)


def _issue_key(issue: PayrollIssue):
    return (issue.work_date or date.min, issue.kind, issue.message)


def _row_date(row: Mapping, keys: Sequence[str]) -> Optional[date]:
    """The row's period date, or None when it is missing or unreadable."""
    for key in keys:
        value = row.get(key)
        if value:
            try:
                return parse_iso_date(value)
            except ValidationError:
                return None
    return None


class PayrollAggregator:
    """Builds one employee's monthly payroll record from attendance and leave.

    A bad attendance, leave or holiday row never aborts the run: it is
    excluded from the totals and reported in ``PayrollResult.issues``.
    """

    def __init__(
        self,
        config: PayrollConfig = DEFAULT_CONFIG,
        *,
        calculator: Optional[PayCalculator] = None,
        leave_calculator: Optional[LeaveDeductionCalculator] = None,
        transport_calculator: Optional[TransportAllowanceCalculator] = None,
    ):
        self._config = config
        self._calculator = calculator or StandardPayCalculator(config)
        self._leave = leave_calculator or LeaveDeductionCalculator(config)
        self._transport = transport_calculator or TransportAllowanceCalculator()

    def _issue(self, totals: _Totals, employee: Employee, work_date, kind: str, message: str, *, skipped: bool) -> None:
        logger.warning("payroll %s %s: %s (%s)", employee.employee_id, work_date or "-", message, kind)
        totals.issues.append(PayrollIssue(employee_id=employee.employee_id, work_date=work_date, kind=kind, message=message))
        if skipped:
            totals.skipped += 1

    def _coerce(self, items, model, employee: Employee, totals: _Totals, kind: str, *, date_keys, month: int, year: int):
        """Validate raw rows and model instances alike.

        Rows of other employees, and rows whose date falls outside the
        period, are dropped before validation.
        """
        out = []
        for item in items:
            if isinstance(item, model):
                row = asdict(item)
            elif isinstance(item, Mapping):
                row = item
            else:
                self._issue(totals, employee, None, kind, f"unsupported row type {type(item).__name__}", skipped=True)
                continue

            owner = row.get("employee_id")
            if owner is not None and owner != employee.employee_id:
                continue
            row_date = _row_date(row, date_keys)
            if row_date is not None and not self._in_period(row_date, month, year):
                continue

            try:
                out.append(model.from_mapping(row))
            except ValidationError as e:
                self._issue(totals, employee, row_date, kind, str(e), skipped=True)
        return out

    @staticmethod
    def _in_period(value, month: int, year: int) -> bool:
        return value.month == month and value.year == year

    def _transport_days(self, totals: _Totals) -> int:
        if self._config.transport_day_basis == TransportDayBasis.PRESENT:
            return totals.days_present
        return totals.days_recorded

    def aggregate(
        self,
        employee: Employee,
        *,
        month: int,
        year: int,
        attendance: Iterable[AttendanceInput],
        leaves: Iterable[LeaveInput] = (),
        holidays: Iterable[HolidayInput] = (),
        alternate_mode_days: int = 0,
    ) -> PayrollResult:
        if not 1 <= int(month) <= 12:
            raise ValidationError(f"Invalid month {month}, expected 1-12")
        month, year = int(month), int(year)

        base_salary = resolve_monthly_salary(employee, self._config)
        totals = _Totals()
        period = dict(month=month, year=year)

        holidays = tuple(
            self._coerce(holidays, Holiday, employee, totals, "malformed_holiday", date_keys=_HOLIDAY_DATE_KEYS, **period)
        )
        records = self._coerce(
            attendance, AttendanceRecord, employee, totals, "malformed_attendance", date_keys=_ATTENDANCE_DATE_KEYS, **period
        )
        # Fixed accumulation order keeps float sums identical for any input order.
        records.sort(key=_sort_key)

        for record in records:
            self._add_attendance(totals, employee, record, holidays)

        leave_rows = self._coerce(leaves, LeaveRequest, employee, totals, "malformed_leave", date_keys=_LEAVE_DATE_KEYS, **period)
        for leave in sorted(leave_rows, key=lambda lv: (lv.start_date, lv.end_date, lv.type.value, lv.total_days, lv.total_hours)):
            if leave.status != LeaveStatus.APPROVED:
                continue
            totals.leave_deduction += self._leave.deduction(base_salary, leave)

        transport = self._transport.allowance(employee, self._transport_days(totals), alternate_mode_days)
        adjusted_base = base_salary - totals.leave_deduction
        total_pay = adjusted_base + totals.overtime_pay + totals.meal_allowance + transport

        record = PayrollRecord(
            employee_id=employee.employee_id,
            name=employee.name,
            position=employee.position,
            department=employee.department,
            month=month,
            year=year,
            regular_hours=round2(totals.regular_hours),
            overtime_hours=round2(totals.overtime_hours),
            regular_pay=round2(totals.regular_pay),
            overtime_pay=round2(totals.overtime_pay),
            meal_allowance=round2(totals.meal_allowance),
            transport_allowance=round2(transport),
            leave_deduction=round2(totals.leave_deduction),
            base_salary=round2(base_salary),
            adjusted_base_salary=round2(adjusted_base),
            total_pay=round2(total_pay),
            days_present=totals.days_present,
            days_late=totals.days_late,
            days_absent=totals.days_absent,
            days_on_leave=totals.days_on_leave,
        )
        logger.info(
            "payroll %s %04d-%02d: total %.2f from %d records (%d skipped, %d issues)",
            employee.employee_id,
            year,
            month,
            record.total_pay,
            len(records),
            totals.skipped,
            len(totals.issues),
        )
        issues = tuple(sorted(totals.issues, key=_issue_key))
        return PayrollResult(record=record, issues=issues, skipped_records=totals.skipped)

    def _add_attendance(self, totals: _Totals, employee: Employee, record: AttendanceRecord, holidays: Sequence[Holiday]) -> None:
        if record.status == AttendanceStatus.ABSENT:
            totals.days_absent += 1
            totals.days_recorded += 1
            return
        if record.status == AttendanceStatus.LEAVE:
            totals.days_on_leave += 1
            totals.days_recorded += 1
            return

        pay = None
        if record.time_in and record.time_out:
            try:
                pay = self._calculator.daily_pay(employee, record.work_date, record.time_in, record.time_out, holidays)
            except DomainError as e:
                self._issue(totals, employee, record.work_date, type(e).__name__, str(e), skipped=True)
                return
        else:
            self._issue(
                totals,
                employee,
                record.work_date,
                "incomplete_attendance",
                "attendance has no clock-out, day counted without pay",
                skipped=False,
            )

        totals.days_present += 1
        totals.days_recorded += 1
        if record.status == AttendanceStatus.LATE:
            totals.days_late += 1

        if pay is not None:
            totals.regular_pay += pay.regular_pay
            totals.overtime_pay += pay.overtime_pay
            totals.meal_allowance += pay.meal_allowance
            totals.regular_hours += pay.regular_hours
            totals.overtime_hours += pay.overtime_hours

    def aggregate_many(
        self,
        employees: Iterable[Employee],
        *,
        month: int,
        year: int,
        attendance: Sequence[AttendanceInput],
        leaves: Sequence[LeaveInput] = (),
        holidays: Sequence[Holiday] = (),
        alternate_mode_days: Optional[Mapping[str, int]] = None,
    ) -> list[PayrollResult]:
        """One result per employee; employees share no state."""
        alternate_mode_days = alternate_mode_days or {}
        return [
            self.aggregate(
                e,
                month=month,
                year=year,
                attendance=attendance,
                leaves=leaves,
                holidays=holidays,
                alternate_mode_days=alternate_mode_days.get(e.employee_id, 0),
            )
            for e in employees
        ]
