"""FastAPI server exposing NMEA log playback to a presentation layer.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

REST endpoints:

* ``GET /api/navigation``: current navigation snapshot.
* ``GET /api/interfaces``: interfaces that can broadcast.
* ``GET /api/playback``: playback status, last error and counters.
* ``POST /api/playback``: start replaying ``{"path", "interface", "port", "reset"}``.
* ``DELETE /api/playback``: stop the running playback.

WebSocket clients connect to ``ws://<host>:8000/ws`` and receive a stream of
``type="navigation"`` JSON messages, one whenever the snapshot changes and a
keepalive at least every two seconds.
"""

import asyncio
import logging
import os
import threading
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request, WebSocket, WebSocketDisconnect, status
from pydantic import BaseModel, Field

from nmeaplay.navigation import NavigationStore
from nmeaplay.playback import (
    DEFAULT_UDP_PORT,
    BroadcastTransport,
    PlaybackConfig,
    PlaybackController,
    list_interfaces,
    resolve_broadcast_target,
)
from server.broadcaster import add_subscriber, remove_subscriber
from server.formatters import (
    format_interfaces,
    format_navigation_message,
    format_playback_status,
    navigation_to_dict,
)
from server.publisher import run_navigation_loop

logger = logging.getLogger(__name__)

_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0
_DEFAULT_INTERFACE = os.environ.get("NMEAPLAY_INTERFACE", "eth0")
_DEFAULT_PORT = int(os.environ.get("NMEAPLAY_PORT", DEFAULT_UDP_PORT))


class PlaybackRequest(BaseModel):
    path: str
    interface: str = _DEFAULT_INTERFACE
    port: int = Field(default=_DEFAULT_PORT, gt=0, lt=65536)
    reset: bool = False


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    loop = asyncio.get_running_loop()
    store = NavigationStore()
    player = PlaybackController(
        store,
        resolver=resolve_broadcast_target,
        transport_factory=BroadcastTransport,
    )
    application.state.store = store
    application.state.player = player

    stop_event = threading.Event()
    executor = ThreadPoolExecutor(max_workers=1)
    loop.run_in_executor(executor, run_navigation_loop, loop, store, stop_event)
    yield
    stop_event.set()
    player.stop()
    executor.shutdown(wait=False)


app = FastAPI(lifespan=_lifespan)


def _player(request: Request) -> PlaybackController:
    player: PlaybackController = request.app.state.player
    return player


@app.get("/api/navigation")
def get_navigation(request: Request) -> dict[str, Any]:
    store: NavigationStore = request.app.state.store
    return navigation_to_dict(store.snapshot())


@app.get("/api/interfaces")
def get_interfaces() -> list[dict[str, str]]:
    return format_interfaces(list_interfaces())


@app.get("/api/playback")
def get_playback(request: Request) -> dict[str, Any]:
    return format_playback_status(_player(request))


@app.post("/api/playback", status_code=status.HTTP_202_ACCEPTED)
def start_playback(body: PlaybackRequest, request: Request) -> dict[str, Any]:
    """Start replaying a log.

    Interface and file errors do not fail the request: they end the
    playback thread, and ``GET /api/playback`` then reports ``failed`` with
    the error message.

    Raises:
        HTTPException: 409 if a playback is already running.
    """
    player = _player(request)
    config = PlaybackConfig(
        path=body.path,
        interface=body.interface,
        port=body.port,
        reset_state=body.reset,
    )
    if not player.start(config):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Playback already running")
    logger.info("Playback requested: %s on %s:%d", body.path, body.interface, body.port)
    return format_playback_status(player)


@app.delete("/api/playback", status_code=status.HTTP_202_ACCEPTED)
def stop_playback(request: Request) -> dict[str, Any]:
    player = _player(request)
    player.stop()
    return format_playback_status(player)


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream navigation snapshots to a connected WebSocket client.

    The current snapshot is sent immediately on connect. Each client then
    gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages); the
    oldest message is dropped when the queue is full so slow clients do not
    stall the publisher. The connection closes with code 1001 if no message
    arrives within ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    await websocket.accept()
    store: NavigationStore = websocket.app.state.store
    await websocket.send_text(format_navigation_message(store.snapshot()))

    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=_QUEUE_MAX_SIZE)
    add_subscriber(queue)
    try:
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        remove_subscriber(queue)
