from __future__ import annotations

import re
from datetime import date, datetime, time

from ..core.exceptions import InvalidTimeFormat, ValidationError

_HHMM = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")

MINUTES_PER_DAY = 24 * 60


def parse_iso_date(value) -> date:
    """Parse YYYY-MM-DD string into date (dates pass through unchanged)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD")


def parse_hhmm(value) -> int:
    """Return minutes since midnight for a 24-hour "HH:MM" string."""
    if not isinstance(value, str):
        raise InvalidTimeFormat(value)
    m = _HHMM.match(value.strip())
    if not m:
        raise InvalidTimeFormat(value)
    return int(m.group(1)) * 60 + int(m.group(2))


def format_hhmm(value: datetime | time) -> str:
    return value.strftime("%H:%M")


def elapsed_minutes(start: str, end: str) -> int:
    start_min = parse_hhmm(start)
    end_min = parse_hhmm(end)
    if end_min < start_min:
        # Overnight shift: the end falls on the following day.
        end_min += MINUTES_PER_DAY
    return end_min - start_min


def elapsed_hours(start: str, end: str) -> float:
    """Hours between two wall-clock times on an implicit common day.

    An ``end`` earlier than ``start`` is read as crossing midnight, so
    ``elapsed_hours("22:00", "06:00") == 8.0``.
    """
    return elapsed_minutes(start, end) / 60


def late_minutes(expected: str, actual: str) -> int:
    """Minutes ``actual`` is past ``expected``; early arrival yields 0."""
    return max(0, parse_hhmm(actual) - parse_hhmm(expected))


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
