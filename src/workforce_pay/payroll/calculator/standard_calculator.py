from __future__ import annotations

from datetime import date
from typing import Iterable

from ...common.datetime_utils import elapsed_hours
from ...employees.model import Employee
from ...holidays.model import Holiday
from ..config import DEFAULT_CONFIG, PayrollConfig
from ..model import DailyPay
from .base import PayCalculator
from .rates import RateResolver
from .salary import resolve_monthly_salary


class StandardPayCalculator(PayCalculator):
    """Standard rule: regular hours at the salary-derived hourly rate,
    hours beyond the standard day at the flat rate of the date's tier,
    plus a fixed meal allowance on long days.
    """

    def __init__(self, config: PayrollConfig = DEFAULT_CONFIG):
        self._config = config

    @property
    def config(self) -> PayrollConfig:
        return self._config

    def hourly_rate(self, employee: Employee) -> float:
        daily_rate = resolve_monthly_salary(employee, self._config) / self._config.working_days_per_month
        return daily_rate / self._config.standard_daily_hours

    def daily_pay(
        self,
        employee: Employee,
        work_date: date,
        time_in: str,
        time_out: str,
        holidays: Iterable[Holiday] = (),
    ) -> DailyPay:
        cfg = self._config
        total_hours = elapsed_hours(time_in, time_out)
        hourly_rate = self.hourly_rate(employee)

        regular_hours = min(total_hours, cfg.standard_daily_hours)
        overtime_hours = max(0.0, total_hours - cfg.standard_daily_hours)
        regular_pay = regular_hours * hourly_rate

        resolver = RateResolver(cfg.overtime_tiers, holidays)
        tier = resolver.resolve(work_date)

        extended_hours = 0.0
        if cfg.extended_after_hours is not None:
            extended_hours = min(overtime_hours, max(0.0, total_hours - cfg.extended_after_hours))
        overtime_pay = (overtime_hours - extended_hours) * resolver.rate_for(tier)
        overtime_pay += extended_hours * cfg.overtime_tiers.extended

        meal = cfg.meal_allowance
        meal_allowance = meal.amount if meal.enabled and total_hours >= meal.minimum_hours else 0.0

        return DailyPay(
            regular_pay=regular_pay,
            overtime_pay=overtime_pay,
            meal_allowance=meal_allowance,
            total_pay=regular_pay + overtime_pay + meal_allowance,
            regular_hours=regular_hours,
            overtime_hours=overtime_hours,
            applied_tier=tier,
            extended_hours=extended_hours,
        )
