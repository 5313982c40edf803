"""Navigation state snapshot type."""

from dataclasses import dataclass

# Shown until the first ZDA sentence arrives
UNSET_UTC_TIMESTAMP = "0000-00-00 00:00:00"


@dataclass(frozen=True)
class NavigationState:
    """Latest decoded navigation values.

    Every field starts at a sentinel value and is overwritten independently
    by the sentence type that carries it, so a snapshot may pair a fresh
    position with an older timestamp. This mirrors the source protocol,
    which interleaves independent sentences.

    Attributes:
        utc_timestamp: ``"YYYY-MM-DD HH:MM:SS"`` from the last ZDA sentence.
        latitude: Decimal degrees, positive North (GGA).
        longitude: Decimal degrees, positive East (GGA).
        course_over_ground: Degrees true (VTG).
        speed_over_ground: Knots (VTG).
        apparent_wind_angle: Degrees off the bow, negative to port (VWR).
        apparent_wind_speed: Knots (VWR).
        depth: Meters, transducer offset applied (DPT).

    Example:
        >>> state = default_navigation_state()
        >>> state.latitude
        49.1234
        >>> state.utc_timestamp
        '0000-00-00 00:00:00'
    """

    utc_timestamp: str
    latitude: float
    longitude: float
    course_over_ground: float
    speed_over_ground: float
    apparent_wind_angle: float
    apparent_wind_speed: float
    depth: float


def default_navigation_state() -> NavigationState:
    """Return the sentinel-valued state shown before any sentence is decoded."""
    return NavigationState(
        utc_timestamp=UNSET_UTC_TIMESTAMP,
        latitude=49.1234,
        longitude=-123.4567,
        course_over_ground=90.0,
        speed_over_ground=5.0,
        apparent_wind_angle=45.0,
        apparent_wind_speed=10.0,
        depth=10.0,
    )
