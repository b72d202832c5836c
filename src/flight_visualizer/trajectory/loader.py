"""Trace document loading.

Structure is checked here, at the boundary where user files come in; the
builder itself never raises and simply yields an empty trajectory for
documents it cannot use.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from flight_visualizer.trajectory.models import TraceDocument, TraceFormatError

_logger = logging.getLogger(__name__)

# Fallback flight over Paris shown until the user loads a file.
SAMPLE_DOCUMENT = TraceDocument(
    icao="000000",
    version="mock",
    base_timestamp=0.0,
    trace=[
        [0, 48.85, 2.35, 1000, 0, 0],
        [10, 48.86, 2.36, 1200, 50, 45],
        [20, 48.87, 2.37, 1400, 100, 90],
        [30, 48.88, 2.38, 1300, 120, 135],
        [40, 48.89, 2.39, 1100, 80, 180],
    ],
)


def parse_trace(text: str | bytes) -> TraceDocument:
    """Parse the text of a trace file.

    Raises:
        TraceFormatError: If *text* is not valid JSON or has the wrong shape.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        _logger.warning("Rejected trace file: %s", exc)
        raise TraceFormatError(f"Invalid JSON: {exc}") from exc
    try:
        document = TraceDocument.from_dict(data)
    except TraceFormatError as exc:
        _logger.warning("Rejected trace file: %s", exc)
        raise
    _logger.info(
        "Loaded trace icao=%s version=%s rows=%d",
        document.icao, document.version, len(document.trace),
    )
    return document


def load_trace_file(path: str | Path) -> TraceDocument:
    """Read and parse the trace file at *path*."""
    return parse_trace(Path(path).read_bytes())
