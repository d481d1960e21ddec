from __future__ import annotations

from ...core import constants
from ...leave.model import LeaveRequest
from ..config import DEFAULT_CONFIG, PayrollConfig


def calculate_leave_deduction(
    base_monthly_salary: float,
    total_days: float = 0,
    total_hours: float = 0,
    *,
    divisor_days: float = constants.DEFAULT_LEAVE_DIVISOR_DAYS,
    standard_daily_hours: float = constants.DEFAULT_STANDARD_DAILY_HOURS,
) -> float:
    """Unpaid-leave deduction; partial-day hours take precedence over days."""
    daily_rate = base_monthly_salary / divisor_days
    if total_hours and total_hours > 0:
        return (daily_rate / standard_daily_hours) * total_hours
    if total_days and total_days > 0:
        return daily_rate * total_days
    return 0.0


class LeaveDeductionCalculator:
    def __init__(self, config: PayrollConfig = DEFAULT_CONFIG):
        self._config = config

    def is_unpaid(self, leave: LeaveRequest) -> bool:
        return leave.type in self._config.unpaid_leave_types

    def deduction(self, base_monthly_salary: float, leave: LeaveRequest) -> float:
        if not self.is_unpaid(leave):
            return 0.0
        return calculate_leave_deduction(
            base_monthly_salary,
            leave.total_days,
            leave.total_hours,
            divisor_days=self._config.leave_divisor_days,
            standard_daily_hours=self._config.standard_daily_hours,
        )
