"""NMEA log player: paced UDP broadcast replay with live navigation state."""

from nmeaplay.navigation import NavigationState, NavigationStore, default_navigation_state
from nmeaplay.nmea import decode_sentence
from nmeaplay.playback import (
    DEFAULT_UDP_PORT,
    PlaybackConfig,
    PlaybackController,
    PlaybackStatus,
    list_interfaces,
    resolve_broadcast_target,
)

__all__ = [
    "DEFAULT_UDP_PORT",
    "NavigationState",
    "NavigationStore",
    "PlaybackConfig",
    "PlaybackController",
    "PlaybackStatus",
    "decode_sentence",
    "default_navigation_state",
    "list_interfaces",
    "resolve_broadcast_target",
]
