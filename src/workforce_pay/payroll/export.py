"""Report exports of payroll and attendance records.

The CSV layout is the contract downstream reporting consumes: one row per
employee, a header row, money as strings with exactly two decimals.
"""

from __future__ import annotations

import csv
import io
from typing import Iterable, Sequence

import pandas as pd

from ..attendance.model import AttendanceRecord
from ..common.money import format2
from ..employees.model import Employee
from .model import PayrollRecord

# (header, PayrollRecord attribute, kind)
_PAYROLL_COLUMNS = [
    ("Employee ID", "employee_id", "text"),
    ("Name", "name", "text"),
    ("Position", "position", "text"),
    ("Department", "department", "text"),
    ("Regular Hours", "regular_hours", "decimal"),
    ("Overtime Hours", "overtime_hours", "decimal"),
    ("Regular Pay", "regular_pay", "decimal"),
    ("Overtime Pay", "overtime_pay", "decimal"),
    ("Meal Allowance", "meal_allowance", "decimal"),
    ("Total Pay", "total_pay", "decimal"),
    ("Transport Allowance", "transport_allowance", "decimal"),
    ("Leave Deduction", "leave_deduction", "decimal"),
    ("Days Present", "days_present", "count"),
    ("Days Late", "days_late", "count"),
    ("Days Absent", "days_absent", "count"),
]

PAYROLL_CSV_COLUMNS = [header for header, _, _ in _PAYROLL_COLUMNS]

ATTENDANCE_CSV_COLUMNS = [
    "Date",
    "Employee ID",
    "Name",
    "Department",
    "Status",
    "Time In",
    "Time Out",
    "Total Hours",
    "Minutes Late",
    "Location",
    "Recorded By",
]


def _format(value, kind: str) -> str:
    if kind == "decimal":
        return format2(value)
    if kind == "count":
        return str(int(value))
    return "" if value is None else str(value)


def payroll_csv_rows(records: Iterable[PayrollRecord]) -> list[dict]:
    return [
        {header: _format(getattr(r, attr), kind) for header, attr, kind in _PAYROLL_COLUMNS}
        for r in records
    ]


def _write_csv(fieldnames: Sequence[str], rows: Iterable[dict]) -> str:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=list(fieldnames), lineterminator="\n")
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    return out.getvalue()


def export_payroll_csv(records: Iterable[PayrollRecord]) -> str:
    return _write_csv(PAYROLL_CSV_COLUMNS, payroll_csv_rows(records))


def export_attendance_csv(records: Iterable[AttendanceRecord], employees: Iterable[Employee]) -> str:
    by_id = {e.employee_id: e for e in employees}
    rows = []
    for r in records:
        employee = by_id.get(r.employee_id)
        rows.append(
            {
                "Date": r.work_date.strftime("%Y-%m-%d"),
                "Employee ID": r.employee_id,
                "Name": employee.name if employee else "",
                "Department": employee.department if employee else "",
                "Status": r.status.value,
                "Time In": r.time_in or "",
                "Time Out": r.time_out or "",
                "Total Hours": format2(r.total_hours),
                "Minutes Late": str(r.minutes_late),
                "Location": r.location,
                "Recorded By": r.recorded_by,
            }
        )
    return _write_csv(ATTENDANCE_CSV_COLUMNS, rows)


def payroll_frame(records: Iterable[PayrollRecord]) -> pd.DataFrame:
    """Numeric DataFrame with the CSV headers, for spreadsheet reports."""
    data = [{header: getattr(r, attr) for header, attr, _ in _PAYROLL_COLUMNS} for r in records]
    return pd.DataFrame(data, columns=PAYROLL_CSV_COLUMNS)


def export_payroll_excel(records: Iterable[PayrollRecord], *, sheet_name: str = "Payroll") -> bytes:
    df = payroll_frame(records)

    # Written in memory, never to disk.
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()
