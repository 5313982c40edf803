"""NMEA data types for classified and decoded sentences.

Design Decisions:
    1. Up-front classification: every line is classified once into a
       ``SentenceType`` and a field list (``RawSentence``). Decoders are then
       selected from a table keyed on the type, instead of repeating a
       prefix test per sentence branch.

    2. One update type per sentence: each decoded sentence produces a small
       dataclass naming exactly the navigation fields it overwrites. The
       store applies it without knowing which sentence it came from.

    3. Non-optional values: replay decoding is best-effort, so an empty or
       corrupt field decodes as ``0.0`` rather than ``None``. The navigation
       snapshot always holds a number.
"""

import enum
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any

# Format of NavigationState.utc_timestamp
UTC_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class SentenceType(str, enum.Enum):
    """Sentence-type codes the decoder understands (characters 3..6 of the tag)."""

    ZDA = "ZDA"  # Time & date
    GGA = "GGA"  # Position fix
    VTG = "VTG"  # Course and speed over ground
    VWR = "VWR"  # Relative (apparent) wind
    DPT = "DPT"  # Depth of water


@dataclass(frozen=True)
class RawSentence:
    """One classified input line.

    Attributes:
        sentence_type: Decoded 3-letter type code.
        talker_id: 2-letter source device code (e.g. ``"GP"``, ``"WI"``).
            Informational only; it never affects decoding.
        fields: Comma-separated fields, checksum suffix removed. ``fields[0]``
            is the ``$``-prefixed tag, e.g. ``"$GPGGA"``.

    Example:
        >>> classify("$SDDPT,10.38,0,*6F")
        RawSentence(sentence_type=<SentenceType.DPT: 'DPT'>, talker_id='SD',
                    fields=('$SDDPT', '10.38', '0', ''))
    """

    sentence_type: SentenceType
    talker_id: str
    fields: tuple[str, ...]


class _Update:
    """Mixin turning an update dataclass into store field assignments."""

    def as_fields(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]


@dataclass(frozen=True)
class TimeUpdate(_Update):
    """Decoded ZDA sentence.

    Attributes:
        recorded_time: Date and time recorded in the log (whole seconds).
        from_fallback: True when part of the date or time was unreadable and
            was filled in from the wall clock. Such times are for display
            only and never move the replay clock.
    """

    recorded_time: datetime
    from_fallback: bool = False

    def as_fields(self) -> dict[str, Any]:
        return {"utc_timestamp": self.recorded_time.strftime(UTC_TIMESTAMP_FORMAT)}


@dataclass(frozen=True)
class PositionUpdate(_Update):
    """Decoded GGA sentence. Degrees, positive North/East."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class CourseUpdate(_Update):
    """Decoded VTG sentence. Course in degrees true, speed in knots."""

    course_over_ground: float
    speed_over_ground: float


@dataclass(frozen=True)
class WindUpdate(_Update):
    """Decoded VWR sentence.

    Attributes:
        apparent_wind_angle: Degrees off the bow, negative to port.
        apparent_wind_speed: Knots.
    """

    apparent_wind_angle: float
    apparent_wind_speed: float


@dataclass(frozen=True)
class DepthUpdate(_Update):
    """Decoded DPT sentence. Depth in meters, transducer offset already applied."""

    depth: float


NavigationUpdate = TimeUpdate | PositionUpdate | CourseUpdate | WindUpdate | DepthUpdate
