"""Tests for the REST playback and navigation endpoints."""

import pytest
from fastapi.testclient import TestClient

from server.main import app
from tests.server.helpers import (
    SAMPLE_LOG,
    SLOW_LOG,
    RecordingTransport,
    wait_for_status,
    write_log,
)


def test_navigation_defaults() -> None:
    with TestClient(app) as client:
        assert client.get("/api/navigation").json() == {
            "utc": "0000-00-00 00:00:00",
            "lat": 49.1234,
            "lon": -123.4567,
            "cog": 90.0,
            "sog": 5.0,
            "awa": 45.0,
            "aws": 10.0,
            "depth": 10.0,
        }


def test_idle_playback_status() -> None:
    with TestClient(app) as client:
        body = client.get("/api/playback").json()
    assert body["status"] == "idle"
    assert body["path"] is None
    assert body["lines_sent"] == 0


def test_interfaces_listed() -> None:
    with TestClient(app) as client:
        assert client.get("/api/interfaces").json() == [
            {"name": "lo", "address": "127.0.0.1", "broadcast": "127.255.255.255"},
            {"name": "eth0", "address": "192.168.1.20", "broadcast": "192.168.1.255"},
        ]


def test_playback_runs_to_completion(tmp_path, recording_transport: RecordingTransport) -> None:
    path = write_log(tmp_path / "sample.nmea", SAMPLE_LOG)
    with TestClient(app) as client:
        response = client.post("/api/playback", json={"path": str(path), "interface": "eth0"})
        assert response.status_code == 202
        assert response.json()["port"] == 10110

        body = wait_for_status(client, "finished")
        assert body["status"] == "finished"
        assert body["lines_sent"] == len(SAMPLE_LOG)

        navigation = client.get("/api/navigation").json()
    assert navigation["lat"] == pytest.approx(49.6308, abs=1e-4)
    assert navigation["awa"] == pytest.approx(-31.7)
    assert navigation["depth"] == pytest.approx(10.38)
    assert recording_transport.sent == [line.encode() for line in SAMPLE_LOG]


def test_second_start_conflicts_until_stopped(tmp_path) -> None:
    path = write_log(tmp_path / "slow.nmea", SLOW_LOG)
    request = {"path": str(path), "interface": "eth0", "port": 2000}
    with TestClient(app) as client:
        assert client.post("/api/playback", json=request).status_code == 202
        assert client.post("/api/playback", json=request).status_code == 409

        assert client.delete("/api/playback").status_code == 202
        assert wait_for_status(client, "stopped")["status"] == "stopped"

        assert client.post("/api/playback", json=request).status_code == 202
        client.delete("/api/playback")


def test_missing_file_reports_failure(tmp_path) -> None:
    request = {"path": str(tmp_path / "missing.nmea"), "interface": "eth0"}
    with TestClient(app) as client:
        assert client.post("/api/playback", json=request).status_code == 202
        body = wait_for_status(client, "failed")
    assert body["status"] == "failed"
    assert "missing.nmea" in body["error"]


def test_unknown_interface_reports_failure(tmp_path) -> None:
    path = write_log(tmp_path / "sample.nmea", SAMPLE_LOG)
    with TestClient(app) as client:
        client.post("/api/playback", json={"path": str(path), "interface": "wlan9"})
        body = wait_for_status(client, "failed")
    assert body["error"] == "Interface 'wlan9' not found"


@pytest.mark.parametrize("port", [0, 70000])
def test_invalid_port_rejected(tmp_path, port: int) -> None:
    with TestClient(app) as client:
        response = client.post(
            "/api/playback",
            json={"path": str(tmp_path / "x.nmea"), "interface": "eth0", "port": port},
        )
    assert response.status_code == 422


def test_reset_flag_restores_defaults(tmp_path) -> None:
    first = write_log(tmp_path / "sample.nmea", SAMPLE_LOG)
    second = write_log(tmp_path / "course.nmea", SAMPLE_LOG[1:2])
    with TestClient(app) as client:
        client.post("/api/playback", json={"path": str(first), "interface": "eth0"})
        wait_for_status(client, "finished")
        assert client.get("/api/navigation").json()["depth"] == pytest.approx(10.38)

        client.post("/api/playback", json={"path": str(second), "interface": "eth0", "reset": True})
        assert wait_for_status(client, "finished")["status"] == "finished"
        navigation = client.get("/api/navigation").json()
    assert navigation["depth"] == 10.0
    assert navigation["lat"] == 49.1234
    assert navigation["cog"] == pytest.approx(359.5)


def test_non_finite_depth_reads_as_zero(tmp_path) -> None:
    path = write_log(tmp_path / "nan.nmea", ["$SDDPT,nan,0,*6F"])
    with TestClient(app) as client:
        client.post("/api/playback", json={"path": str(path), "interface": "eth0"})
        wait_for_status(client, "finished")
        assert client.get("/api/navigation").json()["depth"] == 0.0
