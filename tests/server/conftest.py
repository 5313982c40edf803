"""Pytest fixtures for server module testing."""

from collections.abc import Iterator
from unittest.mock import patch

import pytest

from nmeaplay.playback import BroadcastTarget, InterfaceAddress, InterfaceNotFoundError
from tests.server.helpers import RecordingTransport

_INTERFACES = [
    InterfaceAddress(name="lo", address="127.0.0.1", broadcast="127.255.255.255"),
    InterfaceAddress(name="eth0", address="192.168.1.20", broadcast="192.168.1.255"),
]


def _resolve(interface: str, port: int) -> BroadcastTarget:
    if interface != "eth0":
        raise InterfaceNotFoundError(f"Interface '{interface}' not found")
    return BroadcastTarget(interface="eth0", address="192.168.1.20", broadcast="192.168.1.255", port=port)


@pytest.fixture(autouse=True)
def recording_transport() -> Iterator[RecordingTransport]:
    transport = RecordingTransport()
    with (
        patch("server.main.resolve_broadcast_target", _resolve),
        patch("server.main.BroadcastTransport", transport),
        patch("server.main.list_interfaces", return_value=_INTERFACES),
    ):
        yield transport
