"""Trajectory construction from raw trace documents.

Turns loosely-typed trace rows into :class:`Sample` objects and derives the
bearing, pitch and speed of each leg so the result can be drawn as a path and
animated with :func:`~flight_visualizer.trajectory.interpolator.interpolate_at`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from flight_visualizer.trajectory.geodesy import flight_path_angle, initial_bearing, leg_speed
from flight_visualizer.trajectory.models import (
    AircraftPoint,
    Sample,
    TraceDocument,
    Trajectory,
    to_float,
)

_logger = logging.getLogger(__name__)

_NAN = float("nan")


def _field(row: Any, idx: int) -> Any:
    if isinstance(row, (list, tuple)) and idx < len(row):
        return row[idx]
    return None


def _coordinate(value: Any) -> float:
    # lat/lon are not validated; anything non-numeric degrades to NaN
    return to_float(value, _NAN)


def _optional(value: Any) -> float | None:
    return to_float(value, None)


def _unpack(document: Any) -> tuple[float, Any]:
    """Return ``(base_timestamp, trace)`` for any accepted document shape."""
    if isinstance(document, TraceDocument):
        return document.base_timestamp, document.trace
    if isinstance(document, Mapping):
        return to_float(document.get("timestamp")), document.get("trace")
    return 0.0, None


def parse_samples(document: TraceDocument | Mapping | None) -> list[Sample]:
    """Normalize every trace row of *document* into a :class:`Sample`.

    Returns an empty list when *document* is None or carries no trace list.
    """
    base, trace = _unpack(document)
    if not isinstance(trace, (list, tuple)):
        return []

    samples: list[Sample] = []
    for row in trace:
        samples.append(Sample(
            timestamp=base + to_float(_field(row, 0)),
            lat=_coordinate(_field(row, 1)),
            lon=_coordinate(_field(row, 2)),
            alt=to_float(_field(row, 3)),
            speed_hint=_optional(_field(row, 4)),
            heading_hint=_optional(_field(row, 5)),
            raw=tuple(row) if isinstance(row, (list, tuple)) else (),
        ))
    return samples


def _enrich(sample: Sample, nxt: Sample | None) -> AircraftPoint:
    bearing = sample.heading_hint if sample.heading_hint is not None else 0.0
    speed = sample.speed_hint if sample.speed_hint is not None else 0.0
    pitch = 0.0

    if nxt is not None:
        if sample.heading_hint is None:
            bearing = initial_bearing(sample.lat, sample.lon, nxt.lat, nxt.lon)
        pitch = flight_path_angle(
            sample.lat, sample.lon, sample.alt,
            nxt.lat, nxt.lon, nxt.alt,
        )
        if sample.speed_hint is None:
            speed = leg_speed(
                sample.lat, sample.lon, sample.alt, sample.timestamp,
                nxt.lat, nxt.lon, nxt.alt, nxt.timestamp,
            )

    return AircraftPoint(
        timestamp=sample.timestamp,
        lat=sample.lat,
        lon=sample.lon,
        alt=sample.alt,
        bearing=bearing,
        pitch=pitch,
        speed=speed,
        position=(sample.lon, sample.lat, sample.alt),
        speed_hint=sample.speed_hint,
        heading_hint=sample.heading_hint,
        raw=sample.raw,
    )


def _is_time_ordered(samples: list[Sample]) -> bool:
    return all(a.timestamp <= b.timestamp for a, b in zip(samples, samples[1:]))


def build_trajectory(document: TraceDocument | Mapping | None) -> Trajectory:
    """Build a :class:`Trajectory` from *document*.

    Never raises: a missing document or one without a ``trace`` list yields
    an empty trajectory.  Rows are used in the order given.  Callers are
    expected to supply them in non-decreasing time order; an out-of-order
    trace is logged and returned unsorted, and its bounds are still taken
    from the first and last row.
    """
    samples = parse_samples(document)
    if not samples:
        return Trajectory()

    if not _is_time_ordered(samples):
        _logger.warning(
            "Trace rows are not in time order (%d samples); interpolation "
            "results are undefined", len(samples),
        )

    aircraft = [
        _enrich(s, samples[i + 1] if i + 1 < len(samples) else None)
        for i, s in enumerate(samples)
    ]
    path = [p.position for p in aircraft]
    return Trajectory(
        path=path,
        aircraft=aircraft,
        min_timestamp=aircraft[0].timestamp,
        max_timestamp=aircraft[-1].timestamp,
    )
