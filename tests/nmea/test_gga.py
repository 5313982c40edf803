"""Tests for GGA sentence decoding."""

import pytest

from nmeaplay.nmea import PositionUpdate, classify
from nmeaplay.nmea.fields import convert_to_decimal_degrees
from nmeaplay.nmea.gga import decode_gga


def _decode(line: str) -> PositionUpdate | None:
    sentence = classify(line)
    assert sentence is not None
    return decode_gga(sentence.fields)


class TestDecodeGGA:
    """Tests for decode_gga function."""

    def test_logged_fix_north_west(self):
        result = _decode("$GPGGA,020659.21,4937.8509,N,12401.4384,W,2,9,0.83,,M,,M*44")
        assert result is not None
        assert result.latitude == pytest.approx(49.6308, abs=1e-4)
        assert result.longitude == pytest.approx(-124.0240, abs=1e-4)

    def test_southern_eastern_hemisphere(self):
        result = _decode("$GNGGA,123519.00,3356.123,S,15112.456,E,1,08,0.9,545.4,M,47.0,M,,*7F")
        assert result is not None
        assert result.latitude == pytest.approx(-33.93538333, rel=1e-6)
        assert result.longitude == pytest.approx(151.2076, rel=1e-6)

    @pytest.mark.parametrize(
        ("lat_hemisphere", "lon_hemisphere"),
        [("N", "E"), ("S", "W"), ("n", "e"), ("s", "w"), ("N", "W"), ("S", "E")],
    )
    def test_sign_follows_hemisphere(self, lat_hemisphere, lon_hemisphere):
        line = f"$GPGGA,000000,4807.038,{lat_hemisphere},01131.000,{lon_hemisphere},1"
        result = _decode(line)
        assert result is not None
        assert (result.latitude < 0) == (lat_hemisphere.upper() == "S")
        assert (result.longitude < 0) == (lon_hemisphere.upper() == "W")

    def test_empty_coordinates_decode_as_zero(self):
        result = _decode("$GNGGA,123519.00,,,,,0,00,,,,,,,*5B")
        assert result == PositionUpdate(latitude=0.0, longitude=0.0)

    def test_garbage_coordinate_decodes_as_zero(self):
        result = _decode("$GPGGA,000000,49x7.85,N,12401.4384,W")
        assert result is not None
        assert result.latitude == 0.0
        assert result.longitude == pytest.approx(-124.0240, abs=1e-4)

    @pytest.mark.parametrize("latitude", ["nan", "inf", "-inf", "49_37.85"])
    def test_non_finite_coordinate_decodes_as_zero(self, latitude):
        result = _decode(f"$GPGGA,000000,{latitude},N,12401.4384,W")
        assert result is not None
        assert result.latitude == 0.0
        assert result.longitude == pytest.approx(-124.0240, abs=1e-4)

    def test_any_talker_id_accepted(self):
        assert _decode("$INGGA,000000,4807.038,N,01131.000,E,1") is not None

    def test_truncated_sentence_ignored(self):
        assert _decode("$GPGGA,123519.00,4807.038,N") is None


class TestConvertToDecimalDegrees:
    def test_degrees_and_minutes_split(self):
        assert convert_to_decimal_degrees("4807.038", "N") == pytest.approx(48.1173, rel=1e-6)

    def test_three_digit_degrees(self):
        assert convert_to_decimal_degrees("12401.4384", "E") == pytest.approx(124.02397, rel=1e-6)

    def test_hemisphere_substring_match(self):
        assert convert_to_decimal_degrees("4807.038", " s ") < 0
