"""PlaybackController — time cursor over a trajectory."""

from __future__ import annotations

import math

from flight_visualizer.trajectory.interpolator import TrajectoryInterpolator
from flight_visualizer.trajectory.models import AircraftPoint, Trajectory


class PlaybackController:
    """Play, pause and scrub through a :class:`Trajectory`.

    The controller owns no timer.  Whoever drives it (a
    :class:`~flight_visualizer.playback.ticker.PlaybackTicker`, a UI loop or a
    test) calls :meth:`tick` with the wall-clock time elapsed since the last
    call.

    Parameters
    ----------
    trajectory:
        The flight to play back.
    rate:
        Flight seconds advanced per wall-clock second.
    shortest_arc:
        Interpolate bearing along the shorter arc (see
        :func:`~flight_visualizer.trajectory.interpolator.interpolate_at`).
    """

    def __init__(
        self,
        trajectory: Trajectory,
        rate: float = 1.0,
        shortest_arc: bool = False,
    ) -> None:
        if rate <= 0:
            raise ValueError("rate must be > 0")
        self._trajectory = trajectory
        self._interp = TrajectoryInterpolator(trajectory.aircraft, shortest_arc=shortest_arc)
        self.rate = rate
        self._cursor = trajectory.min_timestamp
        self._playing = False

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def trajectory(self) -> Trajectory:
        return self._trajectory

    @property
    def cursor(self) -> float:
        """Current flight timestamp."""
        return self._cursor

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def can_play(self) -> bool:
        """False when there is nothing to animate (fewer than two points)."""
        return len(self._interp) > 1

    @property
    def at_end(self) -> bool:
        # NaN bounds count as the end so playback cannot run forever
        return not self._cursor < self._trajectory.max_timestamp

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------

    def play(self) -> None:
        """Start playback; restarts from the beginning when already at the end."""
        if not self.can_play:
            return
        if self.at_end:
            self._cursor = self._trajectory.min_timestamp
        self._playing = True

    def pause(self) -> None:
        self._playing = False

    def toggle(self) -> bool:
        """Flip between playing and paused; return the new ``is_playing``."""
        if self._playing:
            self.pause()
        else:
            self.play()
        return self._playing

    def seek(self, timestamp: float) -> AircraftPoint | None:
        """Move the cursor to *timestamp* (clamped) and pause, like a manual scrub.

        A NaN *timestamp* moves to the first point.
        """
        self._playing = False
        lo, hi = self._trajectory.min_timestamp, self._trajectory.max_timestamp
        if math.isnan(timestamp):
            timestamp = lo
        self._cursor = min(max(timestamp, lo), hi)
        return self.current()

    def tick(self, elapsed_s: float) -> AircraftPoint | None:
        """Advance the cursor by *elapsed_s* wall seconds when playing.

        Playback stops by itself on reaching the last point.  Returns the
        aircraft state at the (possibly unchanged) cursor.
        """
        if self._playing and elapsed_s > 0:
            self._cursor = min(
                self._cursor + elapsed_s * self.rate, self._trajectory.max_timestamp
            )
            if self.at_end:
                self._playing = False
        return self.current()

    def current(self) -> AircraftPoint | None:
        """Aircraft state at the cursor, None for an empty trajectory."""
        return self._interp.at(self._cursor)
