"""Tests for NMEA field conversion utilities."""

import pytest

from gpsfix.nmea import parse_gga, parse_time, parse_vtg
from gpsfix.nmea.fields import apply_hemisphere, parse_float_field, parse_int_field


class TestParseFloatField:
    """Tests for parse_float_field function."""

    @pytest.mark.parametrize(
        "value, expected",
        [("545.4", 545.4), ("054.7", 54.7), ("-2.5", -2.5), ("7", 7.0), (".5", 0.5)],
    )
    def test_valid_decimal(self, value, expected):
        assert parse_float_field(value) == pytest.approx(expected)

    @pytest.mark.parametrize("value", ["", "5_4.7", " 54.7", "54.7 ", "1e3", "nan", "inf", ".", "1" * 400])
    def test_invalid_decimal(self, value):
        assert parse_float_field(value) is None


class TestParseIntField:
    """Tests for parse_int_field function."""

    def test_valid_integer(self):
        assert parse_int_field("08") == 8

    def test_hexadecimal(self):
        assert parse_int_field("7F", base=16) == 127

    @pytest.mark.parametrize("value", ["", "-5", "+5", "1_0", " 8", "8 ", "0x7F"])
    def test_invalid_integer(self, value):
        assert parse_int_field(value) is None

    def test_invalid_hexadecimal(self):
        assert parse_int_field("7G", base=16) is None


class TestApplyHemisphere:
    """Tests for apply_hemisphere function."""

    def test_north_and_east_stay_positive(self):
        assert apply_hemisphere(4807.038, "N") == 4807.038
        assert apply_hemisphere(1131.0, "E") == 1131.0

    def test_south_and_west_are_negative(self):
        assert apply_hemisphere(4807.038, "S") == -4807.038
        assert apply_hemisphere(1131.0, "W") == -1131.0

    def test_missing_letter_stays_positive(self):
        assert apply_hemisphere(4807.038, "") == 4807.038


class TestStrictFieldsInSentences:
    """Malformed digits make the whole sentence fail to decode."""

    def test_signed_time_digits(self):
        assert parse_time("12-519") is None
        assert parse_gga("$GPGGA,12-519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*59") is None

    def test_underscore_in_decimal(self):
        assert parse_vtg("$GPVTG,5_4.7,T,034.4,M,005.5,N,010.2,K*27") is None
