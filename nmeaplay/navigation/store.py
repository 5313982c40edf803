"""Thread-safe holder for the live navigation state.

One playback thread writes; any number of presentation threads read. Each
operation holds the lock only for a single field copy or assignment batch.

Read policy:
    ``snapshot()`` copies every field under one lock and is the read
    consumers should use. ``read()`` returns a single field; reading several
    fields one by one may pair values from different sentences. Neither can
    ever observe a half-written individual value.
"""

import dataclasses
import threading
from typing import Any

from nmeaplay.navigation.types import NavigationState, default_navigation_state
from nmeaplay.nmea.types import NavigationUpdate

__all__ = ["NavigationStore"]

_FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(NavigationState))


class NavigationStore:
    """Concurrency-safe container for ``NavigationState``.

    Example::

        store = NavigationStore()
        store.apply(PositionUpdate(latitude=49.63, longitude=-124.02))
        state = store.snapshot()
    """

    def __init__(self, initial: NavigationState | None = None) -> None:
        """Start from *initial*, or the sentinel defaults."""
        self._lock = threading.Lock()
        self._state = initial if initial is not None else default_navigation_state()

    def snapshot(self) -> NavigationState:
        """Return a consistent copy of all fields."""
        with self._lock:
            return self._state

    def read(self, name: str) -> Any:
        """Return the current value of one field.

        Raises:
            KeyError: If *name* is not a ``NavigationState`` field.
        """
        if name not in _FIELD_NAMES:
            raise KeyError(name)
        with self._lock:
            return getattr(self._state, name)

    def update(self, **values: Any) -> None:
        """Overwrite the given fields, leaving all others untouched.

        Raises:
            KeyError: If any name is not a ``NavigationState`` field.
        """
        unknown = values.keys() - _FIELD_NAMES
        if unknown:
            raise KeyError(", ".join(sorted(unknown)))
        with self._lock:
            self._state = dataclasses.replace(self._state, **values)

    def apply(self, update: NavigationUpdate) -> None:
        """Write every field carried by one decoded sentence."""
        self.update(**update.as_fields())

    def reset(self) -> None:
        """Restore the sentinel defaults."""
        with self._lock:
            self._state = default_navigation_state()
