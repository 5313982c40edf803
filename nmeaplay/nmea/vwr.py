"""VWR sentence decoder.

VWR (Relative Wind Speed and Angle) reports apparent wind from a masthead
instrument.

VWR Sentence Format:
    $WIVWR,31.7,L,0.5,N,0.3,M,0.9,K*73
           |    | |   |
           |    | +---+-- Speed in knots
           |    +-- Side of the bow: R (starboard) or L (port)
           +-- Angle off the bow, 0-180 degrees
"""

from nmeaplay.nmea.fields import parse_float_field
from nmeaplay.nmea.types import WindUpdate

_MINIMUM_FIELD_COUNT = 4

_STARBOARD = "R"


def decode_vwr(fields: tuple[str, ...]) -> WindUpdate | None:
    """Decode VWR fields into an apparent wind update.

    The side field folds the 0-180 angle into a signed one: ``R``
    (case-insensitive) keeps the angle, anything else is treated as port
    and negates it.

    Returns:
        WindUpdate, or None if the sentence is truncated.

    Example:
        >>> decode_vwr(("$WIVWR", "31.7", "L", "0.5", "N"))
        WindUpdate(apparent_wind_angle=-31.7, apparent_wind_speed=0.5)
    """
    if len(fields) < _MINIMUM_FIELD_COUNT:
        return None

    angle = parse_float_field(fields[1])
    if fields[2].upper() != _STARBOARD:
        angle = -angle

    return WindUpdate(
        apparent_wind_angle=angle,
        apparent_wind_speed=parse_float_field(fields[3]),
    )
