"""TrajectoryService — holds the loaded trace and its memoized trajectory."""

from __future__ import annotations

import threading

from flight_visualizer.trajectory.builder import build_trajectory
from flight_visualizer.trajectory.interpolator import TrajectoryInterpolator
from flight_visualizer.trajectory.loader import SAMPLE_DOCUMENT, parse_trace
from flight_visualizer.trajectory.models import AircraftPoint, TraceDocument, Trajectory


class TrajectoryService:
    """State shared by the Web API endpoints.

    The trajectory is built once per distinct document and reused for every
    interpolation query until a new document is loaded.  A rejected upload
    leaves the current document in place.

    Parameters
    ----------
    fallback:
        Document served until the user loads one.
    """

    def __init__(self, fallback: TraceDocument = SAMPLE_DOCUMENT) -> None:
        self._fallback = fallback
        self._document: TraceDocument | None = None
        self._lock = threading.Lock()
        self._built_for: TraceDocument | None = None
        self._trajectory = Trajectory()
        self._interps: dict[bool, TrajectoryInterpolator] = {}

    @property
    def document(self) -> TraceDocument:
        """The loaded document, or the fallback when none has been loaded."""
        return self._document if self._document is not None else self._fallback

    @property
    def source(self) -> str:
        return "upload" if self._document is not None else "sample"

    def load_text(self, text: str | bytes) -> TraceDocument:
        """Parse and install a new trace file.

        Raises
        ------
        TraceFormatError
            If *text* is not a valid trace document.  The previously loaded
            document stays active.
        """
        document = parse_trace(text)
        with self._lock:
            self._document = document
        return document

    def reset(self) -> None:
        """Drop the loaded document and go back to the fallback."""
        with self._lock:
            self._document = None

    def _rebuild_if_stale(self) -> None:
        document = self.document
        if self._built_for is not document:
            self._trajectory = build_trajectory(document)
            self._interps = {}
            self._built_for = document

    def trajectory(self) -> Trajectory:
        """Trajectory of the current document, rebuilt only when it changed."""
        with self._lock:
            self._rebuild_if_stale()
            return self._trajectory

    def state_at(self, timestamp: float, shortest_arc: bool = False) -> AircraftPoint | None:
        """Interpolated aircraft state of the current trajectory at *timestamp*."""
        with self._lock:
            self._rebuild_if_stale()
            interp = self._interps.get(shortest_arc)
            if interp is None:
                interp = TrajectoryInterpolator(self._trajectory.aircraft, shortest_arc=shortest_arc)
                self._interps[shortest_arc] = interp
        return interp.at(timestamp)

    def snapshot(self) -> tuple[TraceDocument, Trajectory, str]:
        """Return ``(document, trajectory, source)`` as one consistent view."""
        with self._lock:
            self._rebuild_if_stale()
            return self.document, self._trajectory, self.source
