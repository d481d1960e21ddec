"""Example: run the engine for one employee and one month (no storage, no UI).

Settings come from the module selected by APP_ENV, exactly as a deployment
would load them.
"""

import importlib
import logging
from datetime import date, datetime

from config import get_settings_module

from workforce_pay.container import build_container, load_payroll_settings
from workforce_pay.core.enums import CheckedVia, LeaveStatus, LeaveType
from workforce_pay.employees.model import Employee
from workforce_pay.holidays.model import Holiday
from workforce_pay.leave.model import LeaveRequest
from workforce_pay.payroll.export import export_payroll_csv
from workforce_pay.roster.model import Location, RosterEntry


def main():
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    container = build_container(payroll_settings=load_payroll_settings())

    employee = Employee(
        employee_id="EMP001",
        name="A. Ramgoolam",
        department="Retail",
        position="Cashier",
        transport_daily_rate=180,
    )
    site = Location(name="Port Louis", lat=-20.1609, lng=57.5012, geofence_radius=100)
    roster = [RosterEntry("EMP001", date(2025, 3, d), "09:00", "17:00", "Port Louis") for d in (3, 4, 9)]

    attendance = []
    for clock_in, clock_out in [
        (datetime(2025, 3, 3, 9, 5), datetime(2025, 3, 3, 17, 0)),
        (datetime(2025, 3, 4, 9, 20), datetime(2025, 3, 4, 20, 0)),
        (datetime(2025, 3, 9, 8, 55), datetime(2025, 3, 9, 19, 30)),
    ]:
        record = container.classifier.clock_in(
            employee,
            now=clock_in,
            roster=roster,
            locations=[site],
            coords=(-20.1610, 57.5013),
            checked_via=CheckedVia.GPS,
        )
        attendance.append(container.classifier.clock_out(employee, now=clock_out, existing=record))

    leaves = [
        LeaveRequest("EMP001", date(2025, 3, 14), date(2025, 3, 14), LeaveType.UNPAID, LeaveStatus.APPROVED, total_hours=4),
    ]
    holidays = [Holiday(date(2025, 3, 12), "National Day")]

    result = container.aggregator.aggregate(
        employee, month=3, year=2025, attendance=attendance, leaves=leaves, holidays=holidays
    )
    print(export_payroll_csv([result.record]))
    for issue in result.issues:
        print(f"warning: {issue.work_date} {issue.message}")


if __name__ == "__main__":
    main()
