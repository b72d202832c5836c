"""Tests for PlaybackController."""

from __future__ import annotations

import pytest

from flight_visualizer.playback.controller import PlaybackController
from flight_visualizer.trajectory.builder import build_trajectory
from flight_visualizer.trajectory.loader import SAMPLE_DOCUMENT
from flight_visualizer.trajectory.models import TraceDocument, Trajectory


@pytest.fixture
def trajectory() -> Trajectory:
    return build_trajectory(SAMPLE_DOCUMENT)


def test_starts_paused_at_first_point(trajectory):
    ctl = PlaybackController(trajectory)
    assert ctl.cursor == 0
    assert not ctl.is_playing
    assert ctl.current() is trajectory.aircraft[0]


def test_tick_while_paused_does_not_move(trajectory):
    ctl = PlaybackController(trajectory)
    ctl.tick(5.0)
    assert ctl.cursor == 0


def test_tick_advances_by_rate(trajectory):
    ctl = PlaybackController(trajectory, rate=2.0)
    ctl.play()
    state = ctl.tick(2.5)
    assert ctl.cursor == pytest.approx(5.0)
    assert state.timestamp == pytest.approx(5.0)
    p0, p1 = trajectory.aircraft[:2]
    assert state.lat == pytest.approx((p0.lat + p1.lat) / 2)


def test_playback_stops_at_end(trajectory):
    ctl = PlaybackController(trajectory, rate=10.0)
    ctl.play()
    state = ctl.tick(100.0)
    assert ctl.cursor == trajectory.max_timestamp
    assert not ctl.is_playing
    assert ctl.at_end
    assert state is trajectory.aircraft[-1]


def test_play_at_end_restarts(trajectory):
    ctl = PlaybackController(trajectory)
    ctl.seek(40.0)
    ctl.play()
    assert ctl.is_playing
    assert ctl.cursor == trajectory.min_timestamp


def test_seek_clamps_and_pauses(trajectory):
    ctl = PlaybackController(trajectory)
    ctl.play()
    state = ctl.seek(-50.0)
    assert not ctl.is_playing
    assert ctl.cursor == 0
    assert state is trajectory.aircraft[0]
    ctl.seek(1_000.0)
    assert ctl.cursor == 40


def test_seek_nan_goes_to_first_point(trajectory):
    ctl = PlaybackController(trajectory)
    state = ctl.seek(float("nan"))
    assert ctl.cursor == trajectory.min_timestamp
    assert state is trajectory.aircraft[0]

    ctl.play()
    for _ in range(100):
        ctl.tick(1.0)
    assert not ctl.is_playing
    assert ctl.at_end


def test_nan_bounds_do_not_play_forever():
    traj = build_trajectory(
        TraceDocument(icao="x", version="v", base_timestamp=0.0, trace=[[float("nan"), 1, 2, 3], [10, 1, 2, 3]])
    )
    ctl = PlaybackController(traj)
    ctl.play()
    ctl.tick(1.0)
    assert not ctl.is_playing


def test_seek_inside_range(trajectory):
    ctl = PlaybackController(trajectory)
    state = ctl.seek(25.0)
    assert state.timestamp == 25.0


def test_toggle(trajectory):
    ctl = PlaybackController(trajectory)
    assert ctl.toggle() is True
    assert ctl.toggle() is False


def test_single_point_cannot_play():
    doc = TraceDocument(icao="x", version="1", base_timestamp=0, trace=[[0, 1, 2, 3, None, None]])
    ctl = PlaybackController(build_trajectory(doc))
    assert not ctl.can_play
    ctl.play()
    assert not ctl.is_playing
    assert ctl.current() is not None


def test_empty_trajectory():
    ctl = PlaybackController(Trajectory())
    assert not ctl.can_play
    assert ctl.current() is None
    assert ctl.tick(1.0) is None


def test_invalid_rate_raises(trajectory):
    with pytest.raises(ValueError):
        PlaybackController(trajectory, rate=0.0)


def test_shortest_arc_forwarded():
    doc = TraceDocument(
        icao="x",
        version="1",
        base_timestamp=0,
        trace=[[0, 0, 0, 0, None, 350], [10, 0, 0.001, 0, None, 10]],
    )
    ctl = PlaybackController(build_trajectory(doc), shortest_arc=True)
    assert ctl.seek(5.0).bearing == pytest.approx(0.0, abs=1e-9)
