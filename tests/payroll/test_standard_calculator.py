from datetime import date

import pytest

from workforce_pay.core.enums import OvertimeTier
from workforce_pay.core.exceptions import InvalidTimeFormat, MissingSalaryBasis
from workforce_pay.employees.model import Employee
from workforce_pay.holidays.model import Holiday
from workforce_pay.payroll.calculator.salary import resolve_monthly_salary
from workforce_pay.payroll.calculator.standard_calculator import StandardPayCalculator
from workforce_pay.payroll.config import PayrollConfig

MONDAY = date(2025, 3, 3)
SUNDAY = date(2025, 3, 9)


def test_standard_day_is_all_regular(employee):
    pay = StandardPayCalculator().daily_pay(employee, MONDAY, "09:00", "17:00", [])

    assert pay.regular_hours == 8
    assert pay.overtime_hours == 0
    assert pay.regular_pay == 1000
    assert pay.overtime_pay == 0
    assert pay.meal_allowance == 0
    assert pay.total_pay == 1000
    assert pay.applied_tier == OvertimeTier.REGULAR


def test_weekday_overtime_uses_flat_regular_rate_and_meal(employee):
    pay = StandardPayCalculator().daily_pay(employee, MONDAY, "09:00", "20:00", [])

    assert pay.regular_hours == 8
    assert pay.overtime_hours == 3
    assert pay.overtime_pay == 3 * 127
    assert pay.meal_allowance == 150
    assert pay.total_pay == 1000 + 381 + 150


def test_meal_allowance_threshold_is_inclusive(employee):
    calc = StandardPayCalculator()

    assert calc.daily_pay(employee, MONDAY, "08:00", "18:00").meal_allowance == 150
    assert calc.daily_pay(employee, MONDAY, "08:00", "17:59").meal_allowance == 0


def test_meal_allowance_can_be_disabled(employee):
    calc = StandardPayCalculator(PayrollConfig.from_mapping({"meal_allowance": {"enabled": False}}))

    assert calc.daily_pay(employee, MONDAY, "08:00", "20:00").meal_allowance == 0


def test_sunday_overtime_uses_sunday_rate(employee):
    pay = StandardPayCalculator().daily_pay(employee, SUNDAY, "09:00", "19:30", [])

    assert pay.applied_tier == OvertimeTier.SUNDAY
    assert pay.overtime_hours == 2.5
    assert pay.overtime_pay == 2.5 * 170


def test_holiday_takes_precedence_over_sunday(employee):
    config = PayrollConfig.from_mapping({"overtime_tiers": {"holiday": 200}})
    pay = StandardPayCalculator(config).daily_pay(employee, SUNDAY, "09:00", "19:30", [Holiday(SUNDAY, "Festival")])

    assert pay.applied_tier == OvertimeTier.HOLIDAY
    assert pay.overtime_pay == 2.5 * 200


def test_overnight_shift_hours(employee):
    pay = StandardPayCalculator().daily_pay(employee, MONDAY, "22:00", "08:00")

    assert pay.regular_hours == 8
    assert pay.overtime_hours == 2


def test_extended_hours_paid_at_extended_rate(employee):
    config = PayrollConfig.from_mapping({"extended_after_hours": 10})
    pay = StandardPayCalculator(config).daily_pay(employee, MONDAY, "08:00", "20:00")

    assert pay.overtime_hours == 4
    assert pay.extended_hours == 2
    assert pay.overtime_pay == 2 * 127 + 2 * 255
    assert pay.applied_tier == OvertimeTier.REGULAR


def test_amounts_are_not_rounded_per_day():
    employee = Employee("EMP002", "B", "Retail", "Promoter", monthly_salary=17710)
    pay = StandardPayCalculator().daily_pay(employee, MONDAY, "09:00", "16:20")

    assert pay.regular_pay == pytest.approx((17710 / 26 / 8) * (440 / 60), rel=1e-12)
    assert pay.regular_pay != round(pay.regular_pay, 2)


def test_invalid_time_is_raised(employee):
    with pytest.raises(InvalidTimeFormat):
        StandardPayCalculator().daily_pay(employee, MONDAY, "9am", "17:00")


def test_salary_basis_resolution_order():
    config = PayrollConfig()

    assert resolve_monthly_salary(Employee("E1", "A", "D", "Cashier", monthly_salary=30000), config) == 30000
    assert resolve_monthly_salary(Employee("E2", "A", "D", "Cashier"), config) == 12000
    assert resolve_monthly_salary(Employee("E3", "A", "D", "Promoter", hourly_rate=100), config) == 100 * 8 * 26
    assert resolve_monthly_salary(Employee("E4", "A", "D", "Promoter"), config) == 17710


def test_missing_salary_basis_raises():
    config = PayrollConfig.from_mapping({"base_monthly_salary": None})

    with pytest.raises(MissingSalaryBasis):
        StandardPayCalculator(config).daily_pay(Employee("E5", "A", "D", "Promoter"), MONDAY, "09:00", "17:00")
