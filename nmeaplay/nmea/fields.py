"""NMEA field parsing utilities.

NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). Replay decoding is best-effort: a field that cannot be parsed
becomes ``0.0`` instead of aborting the line, so one corrupt sentence in a
long log never stops playback.
"""

import math

# Hemisphere markers that flip the sign of a coordinate
_NEGATIVE_HEMISPHERES = ("S", "W")


def parse_float_field(value: str, default: float = 0.0) -> float:
    """Parse a string field to float, returning *default* if empty or invalid.

    Args:
        value: String value from an NMEA field
        default: Value returned when the field is empty or unparseable

    Returns:
        Parsed float value, or *default*

    Example:
        >>> parse_float_field("10.38")
        10.38
        >>> parse_float_field("")  # empty field
        0.0
        >>> parse_float_field("nan")  # non-finite values are corrupt data
        0.0
    """
    if not value or "_" in value:
        return default
    try:
        result = float(value)
    except ValueError:
        return default
    if not math.isfinite(result):
        return default
    return result


def parse_int_field(value: str) -> int | None:
    """Parse a string field to int, returning None if empty or invalid.

    Used for the date and time components of ZDA, where the caller picks
    its own fallback rather than a numeric default.

    Example:
        >>> parse_int_field("02")
        2
        >>> parse_int_field("2x")
        None
    """
    if not value or "_" in value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _split_degrees_minutes(value: float) -> tuple[float, float]:
    """Split a packed DDDMM.MMMM number into (degrees, minutes).

    Example:
        >>> _split_degrees_minutes(4937.8509)
        (49.0, 37.8509...)
    """
    scaled = value / 100.0
    degrees = math.floor(scaled)
    minutes = (scaled - degrees) * 100.0
    return float(degrees), minutes


def convert_to_decimal_degrees(value: str, hemisphere: str) -> float:
    """Convert NMEA coordinate (DDDMM.MMMM) to signed decimal degrees.

    The conversion formula is:
        decimal_degrees = floor(v / 100) + frac(v / 100) * 100 / 60

    The result is negated when the hemisphere field contains ``S`` or ``W``
    (case-insensitive). An unparseable coordinate decodes as ``0.0``.

    Args:
        value: Coordinate in DDDMM.MMMM format (e.g., "4937.8509")
        hemisphere: Hemisphere indicator ("N", "S", "E", or "W")

    Returns:
        Decimal degrees (non-negative for N/E, negative for S/W)

    Example:
        >>> convert_to_decimal_degrees("4937.8509", "N")
        49.6308...
        >>> convert_to_decimal_degrees("12401.4384", "W")
        -124.0239...
    """
    degrees, minutes = _split_degrees_minutes(parse_float_field(value))
    decimal_degrees = degrees + minutes / 60.0

    marker = hemisphere.upper()
    if any(negative in marker for negative in _NEGATIVE_HEMISPHERES):
        return -decimal_degrees

    return decimal_degrees
