"""Tests for the headless command-line player."""

from functools import partial

import pytest

from nmeaplay import __main__ as cli
from nmeaplay.playback import BroadcastTarget, InterfaceAddress, PlaybackController
from tests.server.helpers import SAMPLE_LOG, RecordingTransport, write_log

_TARGET = BroadcastTarget(interface="eth0", address="192.168.1.20", broadcast="192.168.1.255", port=10110)


def test_list_interfaces(monkeypatch, capsys) -> None:
    monkeypatch.setattr(
        cli,
        "list_interfaces",
        lambda: [InterfaceAddress(name="eth0", address="192.168.1.20", broadcast="192.168.1.255")],
    )
    assert cli.main(["--list-interfaces"]) == 0
    assert capsys.readouterr().out == "eth0\t192.168.1.20\tbroadcast 192.168.1.255\n"


@pytest.mark.parametrize("argv", [[], ["log.nmea"], ["--interface", "eth0"]])
def test_missing_arguments_exit(monkeypatch, argv) -> None:
    monkeypatch.delenv("NMEAPLAY_INTERFACE", raising=False)
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)
    assert exc_info.value.code == 2


def test_rejects_unknown_log_level() -> None:
    with pytest.raises(SystemExit):
        cli.main(["log.nmea", "-i", "eth0", "--log-level", "TRACE"])


def test_missing_file_returns_failure(tmp_path) -> None:
    assert cli.main([str(tmp_path / "missing.nmea"), "-i", "eth0"]) == 1


def test_successful_playback_returns_zero(tmp_path, monkeypatch) -> None:
    transport = RecordingTransport()
    monkeypatch.setattr(
        cli,
        "PlaybackController",
        partial(
            PlaybackController,
            resolver=lambda interface, port: _TARGET,
            transport_factory=transport,
        ),
    )
    path = write_log(tmp_path / "sample.nmea", SAMPLE_LOG)
    assert cli.main([str(path), "--interface", "eth0", "--port", "10110"]) == 0
    assert transport.sent == [line.encode() for line in SAMPLE_LOG]
