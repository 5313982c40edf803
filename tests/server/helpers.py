"""Helper functions for server tests."""

import time
from pathlib import Path
from typing import Any

from fastapi.testclient import TestClient

from nmeaplay.playback import BroadcastTarget

SAMPLE_LOG = [
    "$GPGGA,020659.21,4937.8509,N,12401.4384,W,2,9,0.83,,M,,M*44",
    "$IIVTG,359.5,T,,M,0.1,N,0.1,K,D*15",
    "$WIVWR,31.7,L,0.5,N,0.3,M,0.9,K*73",
    "$SDDPT,10.38,0,*6F",
]

# Second ZDA is an hour after the first, so playback blocks until stopped
SLOW_LOG = [
    "$GPZDA,120000.00,01,06,2024,00,00",
    "$GPZDA,130000.00,01,06,2024,00,00",
]


class RecordingTransport:
    """Stands in for BroadcastTransport and keeps every payload."""

    def __init__(self) -> None:
        self.sent: list[bytes] = []

    def __call__(self, target: BroadcastTarget) -> "RecordingTransport":
        return self

    def __enter__(self) -> "RecordingTransport":
        return self

    def __exit__(self, *_: object) -> None:
        pass

    def send(self, payload: bytes) -> None:
        self.sent.append(payload)


def write_log(path: Path, lines: list[str]) -> Path:
    path.write_bytes("".join(f"{line}\r\n" for line in lines).encode("ascii"))
    return path


def wait_for_status(client: TestClient, *statuses: str, timeout: float = 5.0) -> dict[str, Any]:
    deadline = time.monotonic() + timeout
    while True:
        body: dict[str, Any] = client.get("/api/playback").json()
        if body["status"] in statuses or time.monotonic() > deadline:
            return body
        time.sleep(0.02)
