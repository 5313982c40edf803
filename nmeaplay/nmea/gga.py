"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) carries the position fix. Only the
coordinates are used for the navigation snapshot.

GGA Sentence Format:
    $GPGGA,020659.21,4937.8509,N,12401.4384,W,2,9,0.83,,M,,M*44
           |         |         | |          | |
           |         |         | |          | +-- Fix quality (unused)
           |         |         | +----------+-- Longitude (DDDMM.MMMM) + E/W
           |         +---------+-- Latitude (DDMM.MMMM) + N/S
           +-- UTC time (unused; pacing relies on ZDA)
"""

from nmeaplay.nmea.fields import convert_to_decimal_degrees
from nmeaplay.nmea.types import PositionUpdate

# Tag, time, latitude, N/S, longitude, E/W
_MINIMUM_FIELD_COUNT = 6


def decode_gga(fields: tuple[str, ...]) -> PositionUpdate | None:
    """Decode GGA fields into a position update.

    Maps NMEA field indices to PositionUpdate attributes:
        fields[2], fields[3] -> latitude
        fields[4], fields[5] -> longitude

    Args:
        fields: Classified GGA fields (tag first).

    Returns:
        PositionUpdate, or None if the sentence is truncated.

    Example:
        >>> decode_gga(("$GPGGA", "020659.21", "4937.8509", "N", "12401.4384", "W"))
        PositionUpdate(latitude=49.6308..., longitude=-124.0239...)
    """
    if len(fields) < _MINIMUM_FIELD_COUNT:
        return None

    return PositionUpdate(
        latitude=convert_to_decimal_degrees(fields[2], fields[3]),
        longitude=convert_to_decimal_degrees(fields[4], fields[5]),
    )
