"""Time interpolation of aircraft state between trace samples."""

from __future__ import annotations

import bisect
import dataclasses
from collections.abc import Sequence

from flight_visualizer.trajectory.geodesy import lerp_angle
from flight_visualizer.trajectory.models import AircraftPoint


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _between(
    prev: AircraftPoint, nxt: AircraftPoint, timestamp: float, shortest_arc: bool
) -> AircraftPoint:
    span = nxt.timestamp - prev.timestamp
    if span < 1e-12:
        return prev
    t = (timestamp - prev.timestamp) / span

    lon = _lerp(prev.lon, nxt.lon, t)
    lat = _lerp(prev.lat, nxt.lat, t)
    alt = _lerp(prev.alt, nxt.alt, t)
    if shortest_arc:
        bearing = lerp_angle(prev.bearing, nxt.bearing, t)
    else:
        bearing = _lerp(prev.bearing, nxt.bearing, t)

    return dataclasses.replace(
        prev,
        timestamp=timestamp,
        lon=lon,
        lat=lat,
        alt=alt,
        bearing=bearing,
        pitch=_lerp(prev.pitch, nxt.pitch, t),
        position=(lon, lat, alt),
    )


def interpolate_at(
    points: Sequence[AircraftPoint],
    timestamp: float,
    *,
    shortest_arc: bool = False,
) -> AircraftPoint | None:
    """Return the aircraft state at *timestamp*.

    *points* must be ordered by ascending ``timestamp``.  Queries outside the
    covered range are clamped to the first/last point, which is returned
    unchanged.  Inside the range, lon/lat/alt/bearing/pitch are linear in time
    between the bracketing points; every other field (speed, hints, raw row)
    is copied from the earlier point.

    Bearing is interpolated linearly on its numeric value, so a leg from 350°
    to 10° sweeps back through 180°.  Pass ``shortest_arc=True`` to go the
    short way round through 0° instead.

    Returns None if *points* is empty.  A NaN query resolves to the first point.
    """
    if not points:
        return None
    if not timestamp > points[0].timestamp:
        return points[0]
    if timestamp >= points[-1].timestamp:
        return points[-1]

    stamps = [p.timestamp for p in points]
    idx = bisect.bisect_left(stamps, timestamp)
    return _between(points[idx - 1], points[idx], timestamp, shortest_arc)


class TrajectoryInterpolator:
    """Interpolator bound to one point sequence.

    Caches the timestamp index so that a query per playback tick costs
    O(log n).  Results are identical to :func:`interpolate_at`.

    Args:
        points: Aircraft points in ascending timestamp order.
        shortest_arc: Interpolate bearing along the shorter arc.
    """

    def __init__(self, points: Sequence[AircraftPoint], shortest_arc: bool = False) -> None:
        self._points = list(points)
        self._stamps = [p.timestamp for p in self._points]
        self.shortest_arc = shortest_arc

    def __len__(self) -> int:
        return len(self._points)

    def at(self, timestamp: float) -> AircraftPoint | None:
        if not self._points:
            return None
        if not timestamp > self._stamps[0]:
            return self._points[0]
        if timestamp >= self._stamps[-1]:
            return self._points[-1]
        idx = bisect.bisect_left(self._stamps, timestamp)
        return _between(self._points[idx - 1], self._points[idx], timestamp, self.shortest_arc)
