"""Fixed-rate tick source driving a PlaybackController."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from flight_visualizer.playback.controller import PlaybackController
from flight_visualizer.trajectory.models import AircraftPoint

_logger = logging.getLogger(__name__)


class PlaybackTicker:
    """Calls :meth:`PlaybackController.tick` at *target_hz* on a background thread.

    Each resulting state is handed to *on_state*.  The thread exits on its own
    once the controller stops playing (end of flight or :meth:`~PlaybackController.pause`).

    Parameters
    ----------
    controller:
        The controller to advance.
    on_state:
        Callback receiving every ``AircraftPoint | None`` produced.
    target_hz:
        Tick frequency in Hz.
    """

    def __init__(
        self,
        controller: PlaybackController,
        on_state: Callable[[AircraftPoint | None], None],
        target_hz: float = 10.0,
    ) -> None:
        if target_hz <= 0:
            raise ValueError("target_hz must be > 0")
        self._controller = controller
        self._on_state = on_state
        self._interval = 1.0 / target_hz
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start playback and the background tick thread.

        Does nothing if the thread is already running.
        """
        if self.running:
            return
        self._controller.play()
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, daemon=True, name="PlaybackTicker")
        self._thread.start()

    def stop(self) -> None:
        """Pause playback, signal the thread to stop and join it."""
        self._controller.pause()
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=2.0)
            self._thread = None

    def join(self, timeout: float | None = None) -> None:
        """Block until playback finishes (or *timeout* elapses)."""
        if self._thread is not None:
            self._thread.join(timeout)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _run(self) -> None:
        last = time.monotonic()
        while not self._stop_event.is_set():
            t0 = time.monotonic()
            state = self._controller.tick(t0 - last)
            last = t0
            self._on_state(state)
            if not self._controller.is_playing:
                _logger.debug("Playback finished at t=%s", self._controller.cursor)
                break
            wait = self._interval - (time.monotonic() - t0)
            if wait > 0:
                self._stop_event.wait(wait)
