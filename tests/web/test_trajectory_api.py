"""/api/trajectory and /api/trace endpoints."""

from __future__ import annotations

from unittest.mock import patch

from tests.web.conftest import make_trace_text


def test_sample_served_before_upload(client):
    resp = client.get("/api/trajectory")
    assert resp.status_code == 200
    data = resp.json()
    assert data["source"] == "sample"
    assert data["icao"] == "000000"
    assert len(data["aircraft"]) == 5
    assert len(data["path"]) == 5
    assert data["min_timestamp"] == 0
    assert data["max_timestamp"] == 40


def test_path_is_lon_lat_alt(client):
    data = client.get("/api/trajectory").json()
    assert data["path"][0] == [2.35, 48.85, 1000.0]
    assert data["aircraft"][0]["position"] == [2.35, 48.85, 1000.0]


def test_upload_replaces_trajectory(client):
    resp = client.post("/api/trace", content=make_trace_text())
    assert resp.status_code == 200
    data = resp.json()
    assert data["source"] == "upload"
    assert data["icao"] == "4ca7b5"
    assert len(data["aircraft"]) == 3
    assert data["min_timestamp"] == 1_700_000_000
    assert data["max_timestamp"] == 1_700_000_060

    again = client.get("/api/trajectory").json()
    assert again["icao"] == "4ca7b5"


def test_invalid_json_returns_422(client):
    resp = client.post("/api/trace", content="{broken")
    assert resp.status_code == 422
    assert "Invalid JSON file" in resp.json()["detail"]


def test_trace_not_array_returns_422(client):
    resp = client.post("/api/trace", content='{"icao": "abc", "trace": 5}')
    assert resp.status_code == 422


def test_failed_upload_keeps_previous_trajectory(client):
    client.post("/api/trace", content=make_trace_text(icao="aaaaaa"))
    resp = client.post("/api/trace", content="not json at all")
    assert resp.status_code == 422
    data = client.get("/api/trajectory").json()
    assert data["icao"] == "aaaaaa"
    assert data["source"] == "upload"


def test_unexpected_error_returns_500(client, service):
    with patch.object(service, "load_text", side_effect=RuntimeError("disk on fire")):
        resp = client.post("/api/trace", content=make_trace_text())
    assert resp.status_code == 500


def test_reset_goes_back_to_sample(client):
    client.post("/api/trace", content=make_trace_text())
    resp = client.delete("/api/trace")
    assert resp.status_code == 200
    assert resp.json()["source"] == "sample"


def test_empty_trace_upload(client):
    resp = client.post("/api/trace", content=make_trace_text(rows=[]))
    assert resp.status_code == 200
    data = resp.json()
    assert data["aircraft"] == []
    assert data["min_timestamp"] == 0
    assert data["max_timestamp"] == 0


def test_non_finite_values_serialized_as_null(client):
    rows = [[0, "bad", 2.35, 1000, None, None], [10, 48.86, 2.36, 1200, None, None]]
    resp = client.post("/api/trace", content=make_trace_text(rows=rows))
    assert resp.status_code == 200
    first = resp.json()["aircraft"][0]
    assert first["lat"] is None
    assert first["bearing"] is None
    assert first["position"] == [2.35, None, 1000.0]


def test_oversized_timestamp_upload_is_accepted(client):
    text = '{"icao": "abc", "timestamp": 1' + "0" * 400 + ', "trace": [[0, 48.85, 2.35, 1000]]}'
    resp = client.post("/api/trace", content=text)
    assert resp.status_code == 200
    data = resp.json()
    assert data["icao"] == "abc"
    assert data["aircraft"][0]["timestamp"] is None
