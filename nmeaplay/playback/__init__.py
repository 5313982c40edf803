"""Paced replay of NMEA logs as UDP broadcasts."""

from nmeaplay.playback.clock import (
    SERIAL_BAUD_RATE,
    BandwidthClock,
    PacingClock,
    PlaybackAnchor,
    ReplayClock,
    make_clock,
)
from nmeaplay.playback.errors import InterfaceNotFoundError, PlaybackError, TransportError
from nmeaplay.playback.player import (
    PlaybackConfig,
    PlaybackController,
    PlaybackStatus,
    has_time_sentences,
    read_log_lines,
)
from nmeaplay.playback.transport import (
    DEFAULT_UDP_PORT,
    BroadcastTarget,
    BroadcastTransport,
    InterfaceAddress,
    list_interfaces,
    resolve_broadcast_target,
)

__all__ = [
    "DEFAULT_UDP_PORT",
    "SERIAL_BAUD_RATE",
    "BandwidthClock",
    "BroadcastTarget",
    "BroadcastTransport",
    "InterfaceAddress",
    "InterfaceNotFoundError",
    "PacingClock",
    "PlaybackAnchor",
    "PlaybackConfig",
    "PlaybackController",
    "PlaybackError",
    "PlaybackStatus",
    "ReplayClock",
    "TransportError",
    "has_time_sentences",
    "list_interfaces",
    "make_clock",
    "read_log_lines",
    "resolve_broadcast_target",
]
