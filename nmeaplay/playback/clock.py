"""Replay pacing.

Two pacing modes reproduce the cadence of the original capture instead of
sending the whole log at once:

Timestamp mode (``ReplayClock``):
    The first decoded ZDA time anchors recorded time to the moment playback
    reached it. For every later line the clock returns::

        target_elapsed = recorded_time - anchor.file_time
        actual_elapsed = now - anchor.wall
        delay          = target_elapsed - actual_elapsed

    clamped at zero: the player throttles when it gets ahead of the
    recording but never stalls to catch up. Lines before the anchor are not
    delayed.

Bandwidth mode (``BandwidthClock``):
    Logs with no ZDA sentence are paced by the wire time each line would
    have taken on a 38400 baud serial link (AIS-class feed), 8 bits per byte.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol

__all__ = [
    "SERIAL_BAUD_RATE",
    "BandwidthClock",
    "PacingClock",
    "PlaybackAnchor",
    "ReplayClock",
    "make_clock",
    "utc_now",
]

SERIAL_BAUD_RATE = 38400
_BITS_PER_BYTE = 8


def utc_now() -> datetime:
    """Current UTC wall-clock time as a naive datetime (log times are naive)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class PlaybackAnchor:
    """Pairing of the first recorded time with the moment it was replayed.

    Attributes:
        file_time: First recorded ZDA time in the log.
        wall_time: UTC wall-clock time when that line was replayed.
        monotonic: ``time.monotonic()`` at the same moment; elapsed time is
            measured on this clock so wall-clock adjustments do not skew
            pacing.
    """

    file_time: datetime
    wall_time: datetime
    monotonic: float


class PacingClock(Protocol):
    """Interface shared by both pacing modes."""

    @property
    def time_fallback(self) -> datetime: ...

    def observe(self, recorded_time: datetime) -> None: ...

    def delay(self, payload: bytes) -> float: ...


class ReplayClock:
    """Timestamp-anchored pacing clock.

    Args:
        monotonic: Source of elapsed time (injectable for tests).
        wall_clock: Source of UTC wall-clock time (injectable for tests).
    """

    def __init__(
        self,
        monotonic: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._monotonic = monotonic
        self._wall_clock = wall_clock
        self._started = wall_clock()
        self._anchor: PlaybackAnchor | None = None
        self._recorded_time: datetime | None = None

    @property
    def anchor(self) -> PlaybackAnchor | None:
        """The playback anchor, or None until the first time sentence."""
        return self._anchor

    @property
    def time_fallback(self) -> datetime:
        """Wall-clock value substituted for unparseable ZDA date/time parts."""
        if self._anchor is None:
            return self._started
        return self._anchor.wall_time

    def observe(self, recorded_time: datetime) -> None:
        """Record the latest decoded time, anchoring on the first call."""
        if self._anchor is None:
            self._anchor = PlaybackAnchor(
                file_time=recorded_time,
                wall_time=self._wall_clock(),
                monotonic=self._monotonic(),
            )
        self._recorded_time = recorded_time

    def delay(self, payload: bytes) -> float:
        """Seconds to wait before sending *payload*; never negative."""
        if self._anchor is None or self._recorded_time is None:
            return 0.0
        target_elapsed = (self._recorded_time - self._anchor.file_time).total_seconds()
        actual_elapsed = self._monotonic() - self._anchor.monotonic
        return max(0.0, target_elapsed - actual_elapsed)


class BandwidthClock:
    """Serial-link pacing clock for logs without time sentences."""

    def __init__(
        self,
        baud_rate: int = SERIAL_BAUD_RATE,
        wall_clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if baud_rate <= 0:
            raise ValueError(f"baud_rate must be positive, got {baud_rate}")
        self._baud_rate = baud_rate
        self._started = wall_clock()

    @property
    def time_fallback(self) -> datetime:
        return self._started

    def observe(self, recorded_time: datetime) -> None:
        pass

    def delay(self, payload: bytes) -> float:
        return len(payload) * _BITS_PER_BYTE / self._baud_rate


def make_clock(has_timestamps: bool) -> PacingClock:
    """Pick the pacing mode for a log, by whether it contains ZDA sentences."""
    if has_timestamps:
        return ReplayClock()
    return BandwidthClock()
