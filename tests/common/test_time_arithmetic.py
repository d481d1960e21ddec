import pytest

from workforce_pay.common.datetime_utils import elapsed_hours, late_minutes, parse_hhmm, parse_iso_date
from workforce_pay.core.exceptions import InvalidTimeFormat, ValidationError


@pytest.mark.parametrize(
    "start,end,hours",
    [
        ("09:00", "17:00", 8.0),
        ("09:00", "09:00", 0.0),
        ("08:15", "18:45", 10.5),
        ("00:00", "23:59", 1439 / 60),
    ],
)
def test_elapsed_hours_same_day(start, end, hours):
    assert elapsed_hours(start, end) == hours


def test_elapsed_hours_crosses_midnight():
    assert elapsed_hours("22:00", "06:00") == 8.0
    assert elapsed_hours("23:30", "00:15") == 0.75


def test_late_minutes_never_negative():
    assert late_minutes("09:00", "09:20") == 20
    assert late_minutes("09:00", "08:40") == 0
    assert late_minutes("13:45", "13:45") == 0


@pytest.mark.parametrize("value", ["9:00", "24:00", "12:60", "1200", "", None, "ab:cd", " 12:00x"])
def test_parse_hhmm_rejects_malformed(value):
    with pytest.raises(InvalidTimeFormat):
        parse_hhmm(value)


def test_elapsed_hours_surfaces_invalid_format():
    with pytest.raises(InvalidTimeFormat):
        elapsed_hours("09:00", "5pm")


def test_parse_iso_date():
    assert parse_iso_date("2025-03-09").isoformat() == "2025-03-09"
    with pytest.raises(ValidationError):
        parse_iso_date("09/03/2025")
