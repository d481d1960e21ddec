from __future__ import annotations

from typing import Optional

from ...common.money import round2
from ...employees.model import Employee


def calculate_transport_allowance(daily_rate: Optional[float], working_days: int, alternate_mode_days: int = 0) -> float:
    """Period allowance for days the employee travelled at their own expense.

    Days on an alternate, non-reimbursed mode (e.g. company taxi) are not
    eligible. Never negative.
    """
    if not daily_rate:
        return 0.0
    eligible_days = max(0, working_days - alternate_mode_days)
    return round2(eligible_days * daily_rate)


class TransportAllowanceCalculator:
    def allowance(self, employee: Employee, working_days: int, alternate_mode_days: int = 0) -> float:
        return calculate_transport_allowance(employee.transport_daily_rate, working_days, alternate_mode_days)
