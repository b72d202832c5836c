"""Trajectory building and time interpolation.

Public API
----------
TraceDocument          - uploaded trace file (``icao``, ``timestamp``, ``trace``)
Sample                 - one normalized trace row
AircraftPoint          - sample enriched with bearing / pitch / speed
Trajectory             - path polyline + aircraft points + time bounds
build_trajectory       - TraceDocument → Trajectory
interpolate_at         - aircraft state at an arbitrary timestamp
TrajectoryInterpolator - interpolate_at with a cached time index
parse_trace            - JSON text → TraceDocument
load_trace_file        - file path → TraceDocument
TraceFormatError       - raised on malformed trace files
SAMPLE_DOCUMENT        - bundled fallback flight
"""

from flight_visualizer.trajectory.builder import build_trajectory
from flight_visualizer.trajectory.interpolator import TrajectoryInterpolator, interpolate_at
from flight_visualizer.trajectory.loader import SAMPLE_DOCUMENT, load_trace_file, parse_trace
from flight_visualizer.trajectory.models import (
    AircraftPoint,
    Sample,
    TraceDocument,
    TraceFormatError,
    Trajectory,
)

__all__ = [
    "SAMPLE_DOCUMENT",
    "AircraftPoint",
    "Sample",
    "TraceDocument",
    "TraceFormatError",
    "Trajectory",
    "TrajectoryInterpolator",
    "build_trajectory",
    "interpolate_at",
    "load_trace_file",
    "parse_trace",
]
