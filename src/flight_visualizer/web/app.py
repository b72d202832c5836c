"""FastAPI Web application: map page and trajectory API."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from flight_visualizer import __version__
from flight_visualizer.trajectory.models import TraceFormatError
from flight_visualizer.web.schemas import AircraftState, HealthResponse, TrajectoryResponse
from flight_visualizer.web.service import TrajectoryService

load_dotenv()  # loads .env from project root; must run before env vars are consumed

_logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

_HERE = Path(__file__).parent

app = FastAPI(title="Flight Trajectory Visualizer", version=__version__)

app.mount("/static", StaticFiles(directory=str(_HERE / "static")), name="static")
templates = Jinja2Templates(directory=str(_HERE / "templates"))

MAP_STYLE = os.environ.get(
    "FLIGHT_VISUALIZER_MAP_STYLE",
    "https://basemaps.cartocdn.com/gl/positron-gl-style/style.json",
)
MODEL_URL = os.environ.get("FLIGHT_VISUALIZER_MODEL_URL", "/static/airplane.obj")
TICK_HZ = float(os.environ.get("FLIGHT_VISUALIZER_TICK_HZ", "10"))
PLAYBACK_RATE = float(os.environ.get("FLIGHT_VISUALIZER_PLAYBACK_RATE", "1.0"))

_service = TrajectoryService()


def _trajectory_response() -> TrajectoryResponse:
    document, trajectory, source = _service.snapshot()
    return TrajectoryResponse.from_trajectory(
        trajectory, icao=document.icao, version=document.version, source=source
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/", response_class=HTMLResponse)
def index(request: Request) -> HTMLResponse:
    """Render the map page."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "map_style": MAP_STYLE,
            "model_url": MODEL_URL,
            "tick_hz": TICK_HZ,
            "playback_rate": PLAYBACK_RATE,
        },
    )


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@app.get("/api/trajectory", response_model=TrajectoryResponse)
def get_trajectory() -> TrajectoryResponse:
    """Return the path, labelled points and time bounds of the current flight."""
    return _trajectory_response()


@app.post("/api/trace", response_model=TrajectoryResponse)
async def upload_trace(request: Request) -> TrajectoryResponse:
    """Replace the current flight with the trace file sent as the request body.

    A malformed file is answered with 422 and the current flight is kept.
    """
    body = await request.body()
    try:
        _service.load_text(body)
    except TraceFormatError as exc:
        raise HTTPException(status_code=422, detail=f"Invalid JSON file. {exc}") from exc
    except Exception as exc:
        _logger.exception("Trace upload failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return _trajectory_response()


@app.delete("/api/trace", response_model=TrajectoryResponse)
def reset_trace() -> TrajectoryResponse:
    """Discard the uploaded flight and show the bundled sample again."""
    _service.reset()
    return _trajectory_response()


@app.get("/api/aircraft", response_model=AircraftState | None)
def aircraft_state(t: float, shortest_arc: bool = False) -> AircraftState | None:
    """Interpolated aircraft state at flight time *t* (clamped to the flight)."""
    point = _service.state_at(t, shortest_arc=shortest_arc)
    if point is None:
        return None
    return AircraftState.from_point(point)
