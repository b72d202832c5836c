"""Time-cursor playback over a trajectory.

Public API
----------
PlaybackController - play / pause / seek / tick over a Trajectory
PlaybackTicker     - background fixed-rate tick source
format_readout     - one-line text description of an AircraftPoint
"""

from flight_visualizer.playback.controller import PlaybackController
from flight_visualizer.playback.readout import format_readout
from flight_visualizer.playback.ticker import PlaybackTicker

__all__ = ["PlaybackController", "PlaybackTicker", "format_readout"]
