from __future__ import annotations

from enum import Enum


class EmploymentStatus(str, Enum):
    """Employment state of a worker, maintained by HR workflows."""

    EMPLOYED = "employed"
    UNEMPLOYED = "unemployed"
    TEMPORARY = "temporary"


class AttendanceStatus(str, Enum):
    """Normalised attendance status stored per employee and day."""

    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"
    LEAVE = "leave"


class CheckedVia(str, Enum):
    """How a clock event was captured."""

    GPS = "gps"
    QR = "qr"
    MANUAL = "manual"


class HolidayType(str, Enum):
    PUBLIC = "public"
    NATIONAL = "national"
    RELIGIOUS = "religious"
    COMPANY = "company"


class LeaveType(str, Enum):
    UNPAID = "unpaid"
    UNPAID_SICK = "unpaid_sick"
    PAID_LOCAL = "paid_local"
    PAID_SICK = "paid_sick"
    MATERNITY = "maternity"
    PATERNITY = "paternity"
    MORTALITY = "mortality"
    VACATION = "vacation"


class LeaveStatus(str, Enum):
    """Approval state of a leave request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class OvertimeTier(str, Enum):
    """Named overtime-rate bucket selected by calendar context."""

    REGULAR = "regular"
    SUNDAY = "sunday"
    HOLIDAY = "holiday"
    EXTENDED = "extended"


class TransportDayBasis(str, Enum):
    """Which days of the month earn the transport allowance."""

    RECORDED = "recorded"  # every attendance day on record, absences and leave included
    PRESENT = "present"  # present and late days only
