"""Live navigation state shared between the player and its readers."""

from nmeaplay.navigation.store import NavigationStore
from nmeaplay.navigation.types import (
    UNSET_UTC_TIMESTAMP,
    NavigationState,
    default_navigation_state,
)

__all__ = [
    "UNSET_UTC_TIMESTAMP",
    "NavigationState",
    "NavigationStore",
    "default_navigation_state",
]
