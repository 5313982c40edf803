"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides course and speed over ground.

VTG Sentence Format:
    $IIVTG,359.5,T,,M,0.1,N,0.1,K,D*15
           |     | | | |   | |   |
           |     | | | |   | +---+-- Speed in km/h (unused)
           |     | | | +---+-- Speed in knots
           |     | +-+-- Track (magnetic north, unused)
           +-----+-- Track (true north, degrees)
"""

from nmeaplay.nmea.fields import parse_float_field
from nmeaplay.nmea.types import CourseUpdate

# Fields up to and including the speed in knots
_MINIMUM_FIELD_COUNT = 6


def decode_vtg(fields: tuple[str, ...]) -> CourseUpdate | None:
    """Decode VTG fields into a course/speed update.

    Maps NMEA field indices to CourseUpdate attributes:
        fields[1] -> course_over_ground (degrees true)
        fields[5] -> speed_over_ground (knots)

    Returns:
        CourseUpdate, or None if the sentence is truncated.
    """
    if len(fields) < _MINIMUM_FIELD_COUNT:
        return None

    return CourseUpdate(
        course_over_ground=parse_float_field(fields[1]),
        speed_over_ground=parse_float_field(fields[5]),
    )
