"""Pydantic response schemas for the Web API."""

from __future__ import annotations

import math

from pydantic import BaseModel

from flight_visualizer.playback.readout import format_readout
from flight_visualizer.trajectory.models import AircraftPoint, Trajectory


def _finite(value: float) -> float | None:
    # JSON has no NaN/Inf; degenerate coordinates go out as null
    return value if math.isfinite(value) else None


class HealthResponse(BaseModel):
    status: str
    version: str


class AircraftState(BaseModel):
    """Everything the map needs to place, orient and describe the aircraft."""

    timestamp: float | None
    lat: float | None
    lon: float | None
    alt: float | None
    bearing: float | None
    pitch: float | None
    speed: float | None
    position: list[float | None]
    orientation: list[float | None]
    """Mesh orientation ``[pitch, yaw, roll]``; yaw is the negated bearing."""
    readout: str

    @classmethod
    def from_point(cls, point: AircraftPoint) -> AircraftState:
        return cls(
            timestamp=_finite(point.timestamp),
            lat=_finite(point.lat),
            lon=_finite(point.lon),
            alt=_finite(point.alt),
            bearing=_finite(point.bearing),
            pitch=_finite(point.pitch),
            speed=_finite(point.speed),
            position=[_finite(v) for v in point.position],
            orientation=[_finite(point.pitch), _finite(-point.bearing), 0.0],
            readout=format_readout(point),
        )


class TrajectoryResponse(BaseModel):
    icao: str
    version: str
    source: str
    """``"upload"`` for a user file, ``"sample"`` for the bundled fallback."""
    path: list[list[float | None]]
    aircraft: list[AircraftState]
    min_timestamp: float
    max_timestamp: float

    @classmethod
    def from_trajectory(
        cls, trajectory: Trajectory, icao: str, version: str, source: str
    ) -> TrajectoryResponse:
        return cls(
            icao=icao,
            version=version,
            source=source,
            path=[[_finite(v) for v in pos] for pos in trajectory.path],
            aircraft=[AircraftState.from_point(p) for p in trajectory.aircraft],
            min_timestamp=_finite(trajectory.min_timestamp) or 0.0,
            max_timestamp=_finite(trajectory.max_timestamp) or 0.0,
        )
