"""Tests for the shared time-of-day decoder."""

import pytest

from gpsfix.nmea import TimeOfDay, parse_time


class TestParseTime:
    """Tests for parse_time function."""

    def test_whole_seconds(self):
        assert parse_time("123519") == TimeOfDay(hour=12, minute=35, second=19, hsec=0)

    @pytest.mark.parametrize("value", ["123519.5", "123519.50", "123519.500"])
    def test_fractions_normalize_to_hundredths(self, value):
        assert parse_time(value) == TimeOfDay(hour=12, minute=35, second=19, hsec=50)

    def test_one_fractional_digit(self):
        assert parse_time("000000.7").hsec == 70

    def test_two_fractional_digits(self):
        assert parse_time("235959.99").hsec == 99

    def test_three_fractional_digits_truncate(self):
        assert parse_time("235959.999").hsec == 99

    @pytest.mark.parametrize("value", ["1235", "1235190", "123519.5000", ""])
    def test_unknown_lengths(self, value):
        assert parse_time(value) is None

    def test_none(self):
        assert parse_time(None) is None

    def test_non_digits(self):
        assert parse_time("12a519") is None

    def test_missing_decimal_point(self):
        assert parse_time("12351950") is None
