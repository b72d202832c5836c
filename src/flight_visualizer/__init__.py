"""Flight trajectory visualizer: trace ingestion, motion derivation and playback."""

__version__ = "0.1.0"
