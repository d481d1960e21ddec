from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Location:
    """A work site with a circular geofence (radius in meters)."""

    name: str
    lat: float
    lng: float
    geofence_radius: float


@dataclass(frozen=True)
class RosterEntry:
    """Assigns one employee to one shift at one site on one date."""

    employee_id: str
    work_date: date
    shift_start: str
    shift_end: str
    location: str
