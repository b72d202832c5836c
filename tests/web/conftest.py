"""Shared fixtures for web tests."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from flight_visualizer.web.app import app
from flight_visualizer.web.service import TrajectoryService


@pytest.fixture
def service() -> TrajectoryService:
    """Fresh service so uploads do not leak between tests."""
    return TrajectoryService()


@pytest.fixture
def client(service):
    """FastAPI test client bound to *service*."""
    with patch("flight_visualizer.web.app._service", service), TestClient(app) as c:
        yield c


def make_trace_text(
    icao: str = "4ca7b5",
    rows: list | None = None,
    timestamp: float = 1_700_000_000,
) -> str:
    """Build the text of an uploaded trace file."""
    if rows is None:
        rows = [
            [0, 53.42, -6.27, 0, None, None],
            [30, 53.44, -6.25, 450, None, None],
            [60, 53.46, -6.23, 900, None, None],
        ]
    return json.dumps({"icao": icao, "version": "2.0", "timestamp": timestamp, "trace": rows})
