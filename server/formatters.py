"""JSON formatting utilities for navigation and playback state."""

import dataclasses
import json
from typing import Any

from nmeaplay.navigation import NavigationState
from nmeaplay.playback import InterfaceAddress, PlaybackController

__all__ = [
    "format_interfaces",
    "format_navigation_message",
    "format_playback_status",
    "navigation_to_dict",
]


def navigation_to_dict(state: NavigationState) -> dict[str, Any]:
    """Map a navigation snapshot to its JSON field names."""
    return {
        "utc": state.utc_timestamp,
        "lat": state.latitude,
        "lon": state.longitude,
        "cog": state.course_over_ground,
        "sog": state.speed_over_ground,
        "awa": state.apparent_wind_angle,
        "aws": state.apparent_wind_speed,
        "depth": state.depth,
    }


def format_navigation_message(state: NavigationState) -> str:
    """Serialize a navigation snapshot into a JSON string for WebSocket transmission."""
    return json.dumps({"type": "navigation", **navigation_to_dict(state)})


def format_playback_status(player: PlaybackController) -> dict[str, Any]:
    config = player.config
    return {
        "status": player.status.value,
        "error": player.error,
        "path": str(config.path) if config is not None else None,
        "interface": config.interface if config is not None else None,
        "port": config.port if config is not None else None,
        "lines_sent": player.lines_sent,
        "send_failures": player.send_failures,
    }


def format_interfaces(interfaces: list[InterfaceAddress]) -> list[dict[str, str]]:
    return [dataclasses.asdict(entry) for entry in interfaces]
