from __future__ import annotations

import math

from ..core.constants import EARTH_RADIUS_KM


def haversine_meters(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in meters between two (lat, lng) points in degrees."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)

    a = math.sin(d_lat / 2) ** 2 + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    # Rounding can push ``a`` marginally outside [0, 1] for antipodal points.
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c * 1000


def within_geofence(
    current_lat: float,
    current_lng: float,
    target_lat: float,
    target_lng: float,
    radius: float,
) -> bool:
    return haversine_meters(current_lat, current_lng, target_lat, target_lng) <= radius
