"""Tests for the navigation publisher loop."""

import json
import threading
import time
from unittest.mock import MagicMock, patch

from nmeaplay.navigation import NavigationStore
from server.publisher import run_navigation_loop


class _Recorder:
    def __init__(self) -> None:
        self.messages: list[dict] = []
        self.lock = threading.Lock()

    def __call__(self, message: str, loop: object) -> None:
        with self.lock:
            self.messages.append(json.loads(message))

    def wait_for(self, count: int, timeout: float = 5.0) -> list[dict]:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            with self.lock:
                if len(self.messages) >= count:
                    return list(self.messages)
            time.sleep(0.01)
        with self.lock:
            return list(self.messages)


def _start(store: NavigationStore, recorder: _Recorder, **intervals: float):
    stop_event = threading.Event()
    thread = threading.Thread(
        target=run_navigation_loop,
        args=(MagicMock(), store, stop_event),
        kwargs=intervals,
        daemon=True,
    )
    thread.start()
    return stop_event, thread


def test_publishes_initial_snapshot_and_changes() -> None:
    store = NavigationStore()
    recorder = _Recorder()
    with patch("server.publisher.broadcast_message", recorder):
        stop_event, thread = _start(store, recorder, poll_interval=0.01, keepalive_interval=60.0)
        assert recorder.wait_for(1)[0]["depth"] == 10.0
        store.update(depth=3.5)
        messages = recorder.wait_for(2)
        stop_event.set()
        thread.join(timeout=2)
    assert not thread.is_alive()
    assert messages[1]["depth"] == 3.5


def test_unchanged_snapshot_is_not_republished_before_keepalive() -> None:
    store = NavigationStore()
    recorder = _Recorder()
    with patch("server.publisher.broadcast_message", recorder):
        stop_event, thread = _start(store, recorder, poll_interval=0.01, keepalive_interval=60.0)
        recorder.wait_for(1)
        time.sleep(0.1)
        stop_event.set()
        thread.join(timeout=2)
    assert len(recorder.messages) == 1


def test_keepalive_republishes_unchanged_snapshot() -> None:
    store = NavigationStore()
    recorder = _Recorder()
    with patch("server.publisher.broadcast_message", recorder):
        stop_event, thread = _start(store, recorder, poll_interval=0.01, keepalive_interval=0.05)
        messages = recorder.wait_for(3)
        stop_event.set()
        thread.join(timeout=2)
    assert len(messages) >= 3
    assert messages[0] == messages[2]
