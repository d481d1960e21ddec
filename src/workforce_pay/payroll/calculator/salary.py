from __future__ import annotations

from ...core.exceptions import MissingSalaryBasis
from ...employees.model import Employee
from ..config import PayrollConfig


def resolve_monthly_salary(employee: Employee, config: PayrollConfig) -> float:
    """Monthly salary basis for ``employee``.

    Order: the employee's own monthly salary, the position default table,
    the employee's hourly rate scaled to a standard month, then the
    deployment-wide base salary.
    """
    if employee.monthly_salary:
        return float(employee.monthly_salary)

    position_default = config.position_salaries.get(employee.position)
    if position_default:
        return float(position_default)

    if employee.hourly_rate:
        return float(employee.hourly_rate) * config.standard_daily_hours * config.working_days_per_month

    if config.base_monthly_salary:
        return float(config.base_monthly_salary)

    raise MissingSalaryBasis(employee.employee_id, employee.position)
