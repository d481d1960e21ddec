from __future__ import annotations

from datetime import datetime

import pytest

from workforce_pay.employees.model import Employee
from workforce_pay.roster.model import Location


@pytest.fixture
def fixed_now():
    # Monday 3 March 2025, 09:00
    return datetime(2025, 3, 3, 9, 0, 0)


@pytest.fixture
def employee():
    # 26000 / 26 days / 8 h = 125 per hour
    return Employee(
        employee_id="EMP001",
        name="A",
        department="Retail",
        position="Promoter",
        monthly_salary=26000,
        transport_daily_rate=100,
    )


@pytest.fixture
def site():
    return Location(name="Port Louis", lat=-20.1609, lng=57.5012, geofence_radius=100)
