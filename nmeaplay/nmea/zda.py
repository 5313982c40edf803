"""ZDA sentence decoder.

ZDA (Time & Date) is the only sentence that carries a full calendar date, so
it drives both the displayed UTC timestamp and replay pacing.

ZDA Sentence Format:
    $GPZDA,234626.99,22,02,2021,08,00*6A
           |         |  |  |    |  |
           |         |  |  |    +--+-- Local zone hours/minutes (unused)
           |         |  |  +-- Year
           |         |  +-- Month
           |         +-- Day
           +-- UTC time (HHMMSS.ss, fractional seconds dropped)
"""

from datetime import date, datetime, time

from nmeaplay.nmea.fields import parse_int_field
from nmeaplay.nmea.types import TimeUpdate

# Tag, time, day, month, year
_MINIMUM_FIELD_COUNT = 5


def _compose_date(fields: tuple[str, ...]) -> date | None:
    year = parse_int_field(fields[4])
    month = parse_int_field(fields[3])
    day = parse_int_field(fields[2])
    if year is None or month is None or day is None:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _compose_time(hhmmss: str) -> time | None:
    hour = parse_int_field(hhmmss[0:2])
    minute = parse_int_field(hhmmss[2:4])
    second = parse_int_field(hhmmss[4:6])
    if hour is None or minute is None or second is None:
        return None
    try:
        return time(hour, minute, second)
    except ValueError:
        return None


def decode_zda(fields: tuple[str, ...], fallback: datetime) -> TimeUpdate | None:
    """Decode ZDA fields into a recorded date-time.

    A malformed date falls back to the date of *fallback* and a malformed
    time of day to its time. Such an update is marked ``from_fallback``: it
    still sets the displayed timestamp, but must not drive replay pacing,
    because the fallback is wall-clock time rather than log time.

    Args:
        fields: Classified ZDA fields (tag first).
        fallback: Wall-clock value of the replay anchor (naive UTC).

    Returns:
        TimeUpdate, or None if the sentence is truncated.

    Example:
        >>> decode_zda(("$GPZDA", "234626.99", "22", "02", "2021"), fallback)
        TimeUpdate(recorded_time=datetime.datetime(2021, 2, 22, 23, 46, 26), from_fallback=False)
    """
    if len(fields) < _MINIMUM_FIELD_COUNT:
        return None

    recorded_date = _compose_date(fields)
    recorded_clock = _compose_time(fields[1])
    if recorded_date is not None and recorded_clock is not None:
        return TimeUpdate(recorded_time=datetime.combine(recorded_date, recorded_clock))

    recorded_time = datetime.combine(
        recorded_date if recorded_date is not None else fallback.date(),
        recorded_clock if recorded_clock is not None else fallback.time(),
    )
    return TimeUpdate(recorded_time=recorded_time, from_fallback=True)
