"""Spherical-earth geometry for consecutive trace samples.

All angles in and out are degrees; distances are metres.  Inputs are not
validated: NaN or infinite coordinates produce NaN results rather than
exceptions.
"""

from __future__ import annotations

import math

EARTH_RADIUS_M = 6_371_000.0  # mean radius used by the haversine formula


def _finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def initial_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Initial great-circle bearing from point 1 to point 2, in [0, 360)."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_lon = math.radians(lon2 - lon1)
    if not _finite(phi1, phi2, d_lon):
        # math.sin/cos raise on inf
        return math.nan
    y = math.sin(d_lon) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(d_lon)
    return (math.degrees(math.atan2(y, x)) + 360.0) % 360.0


def ground_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine great-circle distance between two points."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    if not _finite(phi1, phi2, d_lat, d_lon):
        return math.nan
    a = math.sin(d_lat / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lon / 2) ** 2
    # a can drift a hair above 1.0 for antipodal points
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def flight_path_angle(
    lat1: float, lon1: float, alt1: float,
    lat2: float, lon2: float, alt2: float,
) -> float:
    """Climb angle of the leg in degrees: ``atan2(Δalt, ground distance)``.

    This is what the trajectory exposes as ``pitch``.
    """
    ground = ground_distance(lat1, lon1, lat2, lon2)
    return math.degrees(math.atan2(alt2 - alt1, ground))


def leg_speed(
    lat1: float, lon1: float, alt1: float, t1: float,
    lat2: float, lon2: float, alt2: float, t2: float,
) -> float:
    """Straight-line 3D speed over a leg in m/s; 0 when ``t2 - t1 <= 0``."""
    dt = t2 - t1
    if not dt > 0:
        return 0.0
    ground = ground_distance(lat1, lon1, lat2, lon2)
    return math.hypot(ground, alt2 - alt1) / dt


def lerp_angle(a: float, b: float, t: float) -> float:
    """Interpolate from bearing *a* to *b* along the shorter arc, in [0, 360)."""
    diff = (b - a + 180.0) % 360.0 - 180.0
    return (a + diff * t) % 360.0
