"""GET / map page."""

from __future__ import annotations


def test_index_200(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "Flight Trajectory Visualizer" in resp.text


def test_index_carries_config(client):
    resp = client.get("/")
    assert "/static/airplane.obj" in resp.text
    assert "tickHz" in resp.text


def test_static_script_served(client):
    resp = client.get("/static/app.js")
    assert resp.status_code == 200
    assert "/api/aircraft" in resp.text


def test_static_script_drops_stale_states(client):
    resp = client.get("/static/app.js")
    assert "seq !== stateSeq" in resp.text
