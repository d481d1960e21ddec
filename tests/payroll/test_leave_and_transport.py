from datetime import date

import pytest

from workforce_pay.core.enums import LeaveStatus, LeaveType
from workforce_pay.core.exceptions import ValidationError
from workforce_pay.employees.model import Employee
from workforce_pay.leave.model import LeaveRequest
from workforce_pay.payroll.calculator.leave import LeaveDeductionCalculator, calculate_leave_deduction
from workforce_pay.payroll.calculator.transport import TransportAllowanceCalculator, calculate_transport_allowance
from workforce_pay.payroll.config import PayrollConfig


def _leave(leave_type, days=0, hours=0):
    return LeaveRequest("EMP001", date(2025, 3, 14), date(2025, 3, 14), leave_type, LeaveStatus.APPROVED, days, hours)


def test_full_day_deduction():
    assert calculate_leave_deduction(50000, 1, 0) == 50000 / 22


def test_multi_day_deduction():
    assert calculate_leave_deduction(50000, 3, 0) == (50000 / 22) * 3


def test_partial_day_deduction():
    assert calculate_leave_deduction(50000, 0, 4) == (50000 / 22 / 8) * 4


def test_hours_take_precedence_over_days():
    assert calculate_leave_deduction(50000, 1, 4) == (50000 / 22 / 8) * 4


def test_nothing_to_deduct():
    assert calculate_leave_deduction(50000) == 0


@pytest.mark.parametrize(
    "leave_type",
    [LeaveType.PAID_LOCAL, LeaveType.PAID_SICK, LeaveType.VACATION, LeaveType.MATERNITY, LeaveType.MORTALITY],
)
def test_paid_leave_never_deducts(leave_type):
    calc = LeaveDeductionCalculator()

    assert calc.deduction(50000, _leave(leave_type, days=1)) == 0
    assert calc.deduction(50000, _leave(leave_type, hours=4)) == 0


def test_unpaid_types_deduct_with_configured_divisor():
    calc = LeaveDeductionCalculator(PayrollConfig.from_mapping({"leave_divisor_days": 26}))

    assert calc.deduction(26000, _leave(LeaveType.UNPAID, days=2)) == 2000
    assert calc.deduction(26000, _leave(LeaveType.UNPAID_SICK, hours=4)) == 500


def test_leave_divisor_is_independent_of_working_days():
    config = PayrollConfig()

    assert config.leave_divisor_days == 22
    assert config.working_days_per_month == 26
    assert LeaveDeductionCalculator(config).deduction(50000, _leave(LeaveType.UNPAID, days=1)) == 50000 / 22


def test_leave_from_mapping():
    leave = LeaveRequest.from_mapping(
        {
            "employee_id": "EMP001",
            "start_date": "2025-03-14",
            "end_date": "2025-03-15",
            "type": "unpaid",
            "status": "approved",
            "total_days": 2,
        }
    )

    assert leave.type == LeaveType.UNPAID
    assert leave.total_days == 2
    assert leave.total_hours == 0

    with pytest.raises(ValidationError):
        LeaveRequest.from_mapping({"employee_id": "EMP001", "start_date": "2025-03-14", "type": "sabbatical"})
    with pytest.raises(ValidationError):
        LeaveRequest.from_mapping(
            {"employee_id": "EMP001", "start_date": "2025-03-14", "end_date": "2025-03-10", "type": "unpaid"}
        )


def test_transport_allowance():
    assert calculate_transport_allowance(180, 22) == 3960
    assert calculate_transport_allowance(180, 22, 2) == 3600
    assert calculate_transport_allowance(0.335, 1) == 0.34


def test_transport_allowance_without_rate_is_zero():
    assert calculate_transport_allowance(None, 22) == 0
    assert TransportAllowanceCalculator().allowance(Employee("E1", "A", "D", "Promoter"), 22) == 0


def test_transport_allowance_never_negative():
    assert calculate_transport_allowance(180, 2, 5) == 0


def test_transport_allowance_reads_employee_rate(employee):
    assert TransportAllowanceCalculator().allowance(employee, 20, 1) == 1900
