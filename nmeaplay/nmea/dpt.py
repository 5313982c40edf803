"""DPT sentence decoder.

DPT (Depth of Water) reports depth relative to the transducer plus an
offset: positive for the distance from transducer to waterline, negative for
the distance from transducer to keel.

DPT Sentence Format:
    $SDDPT,10.38,0,*6F
           |     |
           |     +-- Offset from transducer (meters)
           +-- Depth relative to transducer (meters)
"""

from nmeaplay.nmea.fields import parse_float_field
from nmeaplay.nmea.types import DepthUpdate

_MINIMUM_FIELD_COUNT = 3


def decode_dpt(fields: tuple[str, ...]) -> DepthUpdate | None:
    """Decode DPT fields; reported depth is depth + offset, unclamped."""
    if len(fields) < _MINIMUM_FIELD_COUNT:
        return None

    return DepthUpdate(depth=parse_float_field(fields[1]) + parse_float_field(fields[2]))
