from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Iterable

from ...employees.model import Employee
from ...holidays.model import Holiday
from ..model import DailyPay


class PayCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def daily_pay(
        self,
        employee: Employee,
        work_date: date,
        time_in: str,
        time_out: str,
        holidays: Iterable[Holiday] = (),
    ) -> DailyPay:
        raise NotImplementedError
