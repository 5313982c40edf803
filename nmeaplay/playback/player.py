"""Playback orchestration: read, decode, pace and broadcast a log.

A ``PlaybackController`` owns one producer thread per run. For every line
of the log, in recorded order, the thread:

1. decodes the line and writes the result into the ``NavigationStore``
   (before pacing, so the delay uses the time the line itself carried);
2. waits for the delay computed by the pacing clock;
3. broadcasts the raw line.

State machine::

    IDLE --start()--> RUNNING --log exhausted--> FINISHED
                         |------stop()---------> STOPPED
                         +------fatal error----> FAILED

A second ``start()`` while RUNNING is a no-op. Any terminal state may be
started again; each run spawns a fresh thread.

Failure policy:
    Reading the log, resolving the interface and opening the socket are
    fatal for the run: they are configuration errors that will not correct
    themselves mid-run. They end the thread with status FAILED and the
    message in ``error``; the calling process keeps running. A failed send
    is logged and counted, and playback continues with the next line.
"""

import enum
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from os import PathLike

from nmeaplay.navigation.store import NavigationStore
from nmeaplay.nmea.decoder import decode_raw
from nmeaplay.nmea.sentence import classify
from nmeaplay.nmea.types import SentenceType, TimeUpdate
from nmeaplay.playback.clock import PacingClock, make_clock, utc_now
from nmeaplay.playback.errors import PlaybackError
from nmeaplay.playback.transport import (
    DEFAULT_UDP_PORT,
    BroadcastTarget,
    BroadcastTransport,
    resolve_broadcast_target,
)

__all__ = [
    "PlaybackConfig",
    "PlaybackController",
    "PlaybackStatus",
    "has_time_sentences",
    "read_log_lines",
]

logger = logging.getLogger(__name__)

# latin-1 maps every byte to one character, so lines re-encode to the exact
# bytes that were recorded
_LOG_ENCODING = "latin-1"

_THREAD_NAME = "nmea-playback"


class PlaybackStatus(str, enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"
    STOPPED = "stopped"
    FAILED = "failed"


@dataclass(frozen=True)
class PlaybackConfig:
    """What to play and where to send it.

    Attributes:
        path: NMEA log file.
        interface: Interface name or one of its IPv4 addresses.
        port: Destination UDP port.
        reset_state: Restore the navigation defaults before the first line,
            so values from a previous run do not linger.
    """

    path: str | PathLike[str]
    interface: str
    port: int = DEFAULT_UDP_PORT
    reset_state: bool = False


def read_log_lines(path: str | PathLike[str]) -> list[str]:
    """Read a log and return its complete, non-empty lines.

    Lines end in CRLF (LF alone is accepted). Text after the final
    terminator is a partially written line and is dropped.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(path, encoding=_LOG_ENCODING, newline="") as log_file:
        text = log_file.read()
    complete = text.split("\n")[:-1]
    lines = (line.removesuffix("\r") for line in complete)
    return [line for line in lines if line]


def has_time_sentences(lines: list[str]) -> bool:
    """Return True if any line is a readable ZDA sentence (selects timestamp pacing).

    Truncated ZDA lines and ZDA lines whose date or time is unreadable never
    anchor the replay clock, so a log holding only those is paced by
    bandwidth instead.
    """
    fallback = utc_now()
    for line in lines:
        sentence = classify(line)
        if sentence is None or sentence.sentence_type is not SentenceType.ZDA:
            continue
        update = decode_raw(sentence, fallback)
        if isinstance(update, TimeUpdate) and not update.from_fallback:
            return True
    return False


class PlaybackController:
    """Runs log playback on a dedicated thread.

    Args:
        store: Navigation state written by the playback thread.
        resolver: Turns ``(interface, port)`` into a ``BroadcastTarget``.
        transport_factory: Builds the context-managed transport for a target.
        clock_factory: Builds the pacing clock; receives whether the log
            contains time sentences.
    """

    def __init__(
        self,
        store: NavigationStore,
        resolver: Callable[[str, int], BroadcastTarget] = resolve_broadcast_target,
        transport_factory: Callable[[BroadcastTarget], BroadcastTransport] = BroadcastTransport,
        clock_factory: Callable[[bool], PacingClock] = make_clock,
    ) -> None:
        self._store = store
        self._resolver = resolver
        self._transport_factory = transport_factory
        self._clock_factory = clock_factory
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._status = PlaybackStatus.IDLE
        self._error: str | None = None
        self._config: PlaybackConfig | None = None
        self._lines_sent = 0
        self._send_failures = 0

    @property
    def store(self) -> NavigationStore:
        return self._store

    @property
    def status(self) -> PlaybackStatus:
        with self._lock:
            return self._status

    @property
    def error(self) -> str | None:
        """Message of the fatal error that ended the last run, if any."""
        with self._lock:
            return self._error

    @property
    def config(self) -> PlaybackConfig | None:
        """Configuration of the current or last run."""
        with self._lock:
            return self._config

    @property
    def lines_sent(self) -> int:
        return self._lines_sent

    @property
    def send_failures(self) -> int:
        return self._send_failures

    def start(self, config: PlaybackConfig) -> bool:
        """Start playing *config* on a new thread.

        Returns:
            True if playback started, False if a run is already in progress.
        """
        with self._lock:
            if self._status is PlaybackStatus.RUNNING:
                logger.info("Playback already running; ignoring start request")
                return False
            self._stop_event.clear()
            self._status = PlaybackStatus.RUNNING
            self._error = None
            self._config = config
            self._lines_sent = 0
            self._send_failures = 0
            self._thread = threading.Thread(
                target=self._run,
                args=(config,),
                name=_THREAD_NAME,
                daemon=True,
            )
            self._thread.start()
        return True

    def stop(self) -> None:
        """Ask the running playback to end; also interrupts a pacing wait."""
        self._stop_event.set()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the playback thread to exit.

        Returns:
            True if no playback thread is alive afterwards.
        """
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def _finish(self, status: PlaybackStatus, error: str | None = None) -> None:
        with self._lock:
            self._status = status
            self._error = error

    def _run(self, config: PlaybackConfig) -> None:
        try:
            completed = self._play(config)
        except (OSError, PlaybackError, ValueError) as e:
            logger.error("Playback of %s stopped: %s", config.path, e)
            self._finish(PlaybackStatus.FAILED, str(e))
            return
        except BaseException as e:
            self._finish(PlaybackStatus.FAILED, repr(e))
            raise

        status = PlaybackStatus.FINISHED if completed else PlaybackStatus.STOPPED
        logger.info(
            "Playback %s: %d lines sent, %d sends failed",
            status.value,
            self._lines_sent,
            self._send_failures,
        )
        self._finish(status)

    def _play(self, config: PlaybackConfig) -> bool:
        """Play the whole log; return False if stopped early."""
        if config.reset_state:
            self._store.reset()
        lines = read_log_lines(config.path)
        timed = has_time_sentences(lines)
        clock = self._clock_factory(timed)
        target = self._resolver(config.interface, config.port)
        logger.info(
            "Replaying %s: %d lines, %s pacing",
            config.path,
            len(lines),
            "timestamp" if timed else "bandwidth",
        )

        with self._transport_factory(target) as transport:
            for line in lines:
                if self._stop_event.is_set():
                    return False
                self._decode_line(line, clock)
                payload = line.encode(_LOG_ENCODING)
                delay = clock.delay(payload)
                if delay > 0 and self._stop_event.wait(delay):
                    return False
                self._send(transport, payload)
        return True

    def _decode_line(self, line: str, clock: PacingClock) -> None:
        sentence = classify(line)
        if sentence is None:
            logger.debug("Ignoring unrecognized line: %.40s", line)
            return
        update = decode_raw(sentence, clock.time_fallback)
        if update is None:
            return
        if isinstance(update, TimeUpdate) and not update.from_fallback:
            clock.observe(update.recorded_time)
        self._store.apply(update)

    def _send(self, transport: BroadcastTransport, payload: bytes) -> None:
        try:
            transport.send(payload)
        except OSError as e:
            self._send_failures += 1
            logger.warning("Failed to broadcast %.40r: %s", payload, e)
            return
        self._lines_sent += 1
