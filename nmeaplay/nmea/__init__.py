"""NMEA 0183 decoder for the ZDA, GGA, VTG, VWR and DPT sentences."""

from nmeaplay.nmea.decoder import decode_raw, decode_sentence
from nmeaplay.nmea.sentence import classify
from nmeaplay.nmea.types import (
    UTC_TIMESTAMP_FORMAT,
    CourseUpdate,
    DepthUpdate,
    NavigationUpdate,
    PositionUpdate,
    RawSentence,
    SentenceType,
    TimeUpdate,
    WindUpdate,
)

__all__ = [
    "UTC_TIMESTAMP_FORMAT",
    "CourseUpdate",
    "DepthUpdate",
    "NavigationUpdate",
    "PositionUpdate",
    "RawSentence",
    "SentenceType",
    "TimeUpdate",
    "WindUpdate",
    "classify",
    "decode_raw",
    "decode_sentence",
]
