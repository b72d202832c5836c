"""Single-line textual readout of the current aircraft state."""

from __future__ import annotations

import math

from flight_visualizer.trajectory.models import AircraftPoint


def _plain(value: float) -> str:
    """Integral values without a decimal point, others to 2 dp."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return f"{value:.2f}"


def format_readout(point: AircraftPoint | None) -> str:
    """Return e.g. ``Timestamp: 10 | Speed: 50.0 m/s | Altitude: 1200 m | Bearing: 45.0° | Pitch: 1.1°``.

    Returns an empty string when there is no point to describe.
    """
    if point is None:
        return ""
    return " | ".join((
        f"Timestamp: {_plain(point.timestamp)}",
        f"Speed: {point.speed:.1f} m/s",
        f"Altitude: {_plain(point.alt)} m",
        f"Bearing: {point.bearing:.1f}°",
        f"Pitch: {point.pitch:.1f}°",
    ))
