"""Background loop publishing navigation snapshots to WebSocket clients."""

import asyncio
import threading

from nmeaplay.navigation import NavigationState, NavigationStore
from server.broadcaster import broadcast_message
from server.formatters import format_navigation_message

__all__ = ["run_navigation_loop"]

_POLL_INTERVAL = 0.2  # seconds between store polls (5 Hz)
_KEEPALIVE_INTERVAL = 2.0  # republish an unchanged snapshot this often


def run_navigation_loop(
    loop: asyncio.AbstractEventLoop,
    store: NavigationStore,
    stop_event: threading.Event,
    poll_interval: float = _POLL_INTERVAL,
    keepalive_interval: float = _KEEPALIVE_INTERVAL,
) -> None:
    """Poll *store* and broadcast each new snapshot until *stop_event* is set.

    The store has no change notification, so it is sampled at a fixed rate.
    A snapshot is published when it differs from the last one published, or
    when *keepalive_interval* has passed without a publish, so idle clients
    keep receiving data while no log is playing.

    Args:
        loop: Running asyncio event loop to broadcast messages on.
        store: Navigation state written by the playback thread.
        stop_event: Set by the caller to end the loop.
        poll_interval: Seconds between samples.
        keepalive_interval: Maximum seconds between publishes.
    """
    last_state: NavigationState | None = None
    since_publish = 0.0
    while not stop_event.is_set():
        state = store.snapshot()
        if state != last_state or since_publish >= keepalive_interval:
            broadcast_message(format_navigation_message(state), loop)
            last_state = state
            since_publish = 0.0
        stop_event.wait(poll_interval)
        since_publish += poll_interval
