"""Manages WebSocket subscriber queues fed from the publisher thread."""

import asyncio

__all__ = ["add_subscriber", "broadcast_message", "remove_subscriber", "subscriber_count"]

_client_queues: list[asyncio.Queue[str]] = []


def add_subscriber(queue: asyncio.Queue[str]) -> None:
    """Register a client queue; called on the event loop."""
    _client_queues.append(queue)


def remove_subscriber(queue: asyncio.Queue[str]) -> None:
    """Unregister a client queue; called on the event loop."""
    if queue in _client_queues:
        _client_queues.remove(queue)


def subscriber_count() -> int:
    return len(_client_queues)


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    # Slow clients lose the oldest snapshot, never the newest
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


def broadcast_message(message: str, loop: asyncio.AbstractEventLoop) -> None:
    """Hand a message to every subscriber queue from a non-loop thread."""
    for queue in list(_client_queues):
        loop.call_soon_threadsafe(_enqueue_message, queue, message)
