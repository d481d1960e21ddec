from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EmploymentStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee as read by the pay engine.

    Note: Plain data object. It is created and edited by HR workflows
    outside the engine; the engine only reads it.
    """

    employee_id: str
    name: str
    department: str
    position: str
    monthly_salary: Optional[float] = None
    hourly_rate: Optional[float] = None
    transport_daily_rate: Optional[float] = None
    status: EmploymentStatus = EmploymentStatus.EMPLOYED
