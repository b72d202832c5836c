"""Trajectory data models."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

Position = tuple[float, float, float]
"""``(lon, lat, alt)`` in the order the map renderer expects."""


class TraceFormatError(ValueError):
    """Raised when a trace document cannot be parsed or has the wrong shape."""


def is_number(value: Any) -> bool:
    """Return True for int/float values (``bool`` is not a number here)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_float(value: Any, default: float | None = 0.0) -> float | None:
    """Return *value* as a float, or *default* when it is not a number.

    JSON integers too large for a float become ``inf``/``-inf`` instead of
    raising :class:`OverflowError`.
    """
    if not is_number(value):
        return default
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


@dataclass
class TraceDocument:
    """An ADS-B style trace file as uploaded by the user.

    ``trace`` rows are ``[seconds_offset, lat, lon, alt, speed, heading, ...]``
    and are assumed (not verified) to be in non-decreasing offset order.
    """

    icao: str
    """Aircraft ICAO hex address."""

    version: str
    """Free-form producer version string."""

    base_timestamp: float
    """Epoch seconds; every row offset is relative to this (JSON key ``timestamp``)."""

    trace: list[list[Any]] = field(default_factory=list)
    """Raw trace rows, kept loosely typed."""

    @classmethod
    def from_dict(cls, data: Any) -> TraceDocument:
        """Create a :class:`TraceDocument` from decoded JSON.

        Raises:
            TraceFormatError: If *data* is not an object or ``trace`` is not a list.
        """
        if not isinstance(data, Mapping):
            raise TraceFormatError("Trace document must be a JSON object")
        trace = data.get("trace")
        if not isinstance(trace, list):
            raise TraceFormatError("Trace document has no 'trace' array")
        return cls(
            icao=str(data.get("icao", "")),
            version=str(data.get("version", "")),
            base_timestamp=to_float(data.get("timestamp")),
            trace=trace,
        )

    def to_dict(self) -> dict:
        """Return the document in its on-disk JSON shape."""
        return {
            "icao": self.icao,
            "version": self.version,
            "timestamp": self.base_timestamp,
            "trace": self.trace,
        }


@dataclass(frozen=True)
class Sample:
    """One normalized trace row."""

    timestamp: float
    """Absolute epoch seconds (document timestamp + row offset)."""

    lat: float
    lon: float

    alt: float
    """Altitude as given in the trace, 0 when missing."""

    speed_hint: float | None
    """Reported speed, None when the row carries none."""

    heading_hint: float | None
    """Reported heading in degrees, None when the row carries none."""

    raw: tuple = ()
    """The untouched source row, including any extra fields."""


@dataclass(frozen=True)
class AircraftPoint:
    """A sample enriched with the motion attributes the renderer needs.

    ``pitch`` is the flight-path (climb) angle of the leg to the next sample,
    derived from altitude change over ground distance.  It is *not* the body
    pitch attitude of the aircraft; the name is kept for the 3D model
    orientation it drives.
    """

    timestamp: float
    lat: float
    lon: float
    alt: float

    bearing: float
    """Degrees clockwise from true north, [0, 360)."""

    pitch: float
    """Flight-path angle in degrees, positive when climbing."""

    speed: float
    """Ground-plus-vertical speed in m/s, >= 0."""

    position: Position
    """``(lon, lat, alt)``."""

    speed_hint: float | None = None
    heading_hint: float | None = None
    raw: tuple = ()

    def is_finite(self) -> bool:
        """Return True if the rendered fields contain no NaN/Inf."""
        floats = (self.lat, self.lon, self.alt, self.bearing, self.pitch, self.speed)
        return all(math.isfinite(f) for f in floats)


@dataclass(frozen=True)
class Trajectory:
    """Renderable flight: polyline, enriched points and time bounds.

    ``len(path) == len(aircraft)`` always holds; both follow the source row
    order.  Bounds are taken from the first and last point (0 when empty).
    """

    path: list[Position] = field(default_factory=list)
    aircraft: list[AircraftPoint] = field(default_factory=list)
    min_timestamp: float = 0.0
    max_timestamp: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.aircraft

    @property
    def duration(self) -> float:
        """Seconds between the first and last point."""
        return self.max_timestamp - self.min_timestamp
