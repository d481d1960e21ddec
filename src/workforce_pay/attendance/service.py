from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import elapsed_hours, format_hhmm, late_minutes
from ..common.geo import haversine_meters
from ..core.enums import AttendanceStatus, CheckedVia
from ..core.exceptions import (
    AlreadyCompleted,
    InvalidCheckinToken,
    NoOpenSession,
    NoShiftAssigned,
    OutOfRange,
    UnknownLocation,
    ValidationError,
)
from ..employees.model import Employee
from ..payroll.config import DEFAULT_CONFIG, PayrollConfig
from ..roster.model import Location, RosterEntry
from ..roster.service import find_location, find_roster_entry
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord
from .qr import validate_checkin_token

logger = logging.getLogger(__name__)


class AttendanceClassifier:
    """Turns clock events into classified attendance records.

    Pure: every method returns a new record for the caller to persist and
    never touches storage.
    """

    def __init__(
        self,
        config: PayrollConfig = DEFAULT_CONFIG,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
    ):
        self._config = config
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def _check_geofence(self, site: Location, coords: tuple[float, float]) -> None:
        lat, lng = coords
        distance = haversine_meters(lat, lng, site.lat, site.lng)
        if distance > site.geofence_radius:
            raise OutOfRange(site.name, site.geofence_radius, distance)

    def clock_in(
        self,
        employee: Employee,
        *,
        now: datetime,
        roster: Iterable[RosterEntry],
        locations: Iterable[Location],
        coords: Optional[tuple[float, float]] = None,
        existing: Optional[AttendanceRecord] = None,
        checked_via: CheckedVia = CheckedVia.GPS,
        qr_token: Optional[str] = None,
        recorded_by: str = "system",
    ) -> AttendanceRecord:
        today = now.date()

        if existing is not None and existing.time_in is not None:
            if existing.time_out is not None:
                raise AlreadyCompleted(employee.employee_id, today)
            raise AlreadyCompleted(
                employee.employee_id,
                today,
                f"{employee.employee_id} already clocked in on {today} at {existing.time_in}",
            )

        shift = find_roster_entry(roster, employee_id=employee.employee_id, work_date=today)
        if not shift:
            raise NoShiftAssigned(employee.employee_id, today)

        site = find_location(locations, shift.location)
        if not site:
            raise UnknownLocation(shift.location)

        if checked_via == CheckedVia.GPS:
            if coords is None:
                raise ValidationError("GPS clock-in requires the employee's current position")
            self._check_geofence(site, coords)
        elif checked_via == CheckedVia.QR:
            if not validate_checkin_token(qr_token, now, ttl_minutes=self._config.qr_token_ttl_minutes):
                raise InvalidCheckinToken("QR code is invalid or has expired")
            if coords is not None:
                self._check_geofence(site, coords)

        time_in = format_hhmm(now)
        minutes = late_minutes(shift.shift_start, time_in)
        threshold = int(self._config.late_threshold_minutes)
        strategy = self._factory.for_checkin(minutes_late=minutes, threshold_minutes=threshold)
        decision = strategy.decide_checkin(minutes_late=minutes, threshold_minutes=threshold)

        logger.debug(
            "clock-in %s on %s at %s (shift %s): %s, %d min late",
            employee.employee_id,
            today,
            time_in,
            shift.shift_start,
            decision.status.value,
            minutes,
        )
        return AttendanceRecord(
            employee_id=employee.employee_id,
            work_date=today,
            status=decision.status,
            time_in=time_in,
            minutes_late=minutes,
            location=site.name,
            checked_via=checked_via,
            recorded_by=recorded_by,
            note=decision.note,
        )

    def clock_out(
        self,
        employee: Employee,
        *,
        now: datetime,
        existing: Optional[AttendanceRecord],
    ) -> AttendanceRecord:
        """Close the open session in ``existing``.

        The session may have started the previous calendar day (overnight
        shift); the record keeps its clock-in date.
        """
        today = now.date()
        if existing is None or existing.employee_id != employee.employee_id or existing.time_in is None:
            raise NoOpenSession(employee.employee_id, today)
        if existing.time_out is not None:
            raise AlreadyCompleted(employee.employee_id, existing.work_date)

        time_out = format_hhmm(now)
        total = elapsed_hours(existing.time_in, time_out)
        overtime = max(0.0, total - self._config.standard_daily_hours)
        logger.debug("clock-out %s at %s: %.2f h, %.2f h overtime", employee.employee_id, time_out, total, overtime)
        # Status stays as decided at clock-in.
        return replace(existing, time_out=time_out, total_hours=total, overtime_hours=overtime)

    def match_to_roster(
        self,
        records: Iterable[AttendanceRecord],
        roster: Sequence[RosterEntry],
    ) -> list[AttendanceRecord]:
        """Re-derive lateness and status of recorded check-ins from the roster.

        Records without a ``time_in``, absences, leave days and days with no
        roster entry are returned unchanged.
        """
        threshold = int(self._config.late_threshold_minutes)
        out: list[AttendanceRecord] = []
        for record in records:
            if record.time_in is None or record.status not in (AttendanceStatus.PRESENT, AttendanceStatus.LATE):
                out.append(record)
                continue

            shift = find_roster_entry(roster, employee_id=record.employee_id, work_date=record.work_date)
            if not shift:
                out.append(record)
                continue

            minutes = late_minutes(shift.shift_start, record.time_in)
            decision = self._factory.for_checkin(minutes_late=minutes, threshold_minutes=threshold).decide_checkin(
                minutes_late=minutes, threshold_minutes=threshold
            )
            out.append(replace(record, minutes_late=minutes, status=decision.status))
        return out
