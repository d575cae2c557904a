"""Tests for GGA sentence parsing."""

import logging

import pytest

from gpsfix.nmea import Presence, parse_gga

GGA_VALID = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47\r\n"


class TestParseGGA:
    """Tests for parse_gga function."""

    def test_valid_gga_with_fix(self):
        result = parse_gga(GGA_VALID)
        assert result is not None
        assert (result.hour, result.minute, result.second, result.hsec) == (12, 35, 19, 0)
        assert result.latitude == pytest.approx(4807.038)
        assert result.ns == "N"
        assert result.longitude == pytest.approx(1131.0)
        assert result.ew == "E"
        assert result.sig == 1
        assert result.satinuse == 8
        assert result.hdop == pytest.approx(0.9)
        assert result.elevation == pytest.approx(545.4)
        assert result.elevation_units == "M"
        assert result.diff == pytest.approx(46.9)
        assert result.dgps_age == 0.0
        assert result.dgps_sid == 0

    def test_presence_of_supplied_fields(self):
        result = parse_gga(GGA_VALID)
        assert result.present == (
            Presence.UTCTIME | Presence.LAT | Presence.LON | Presence.SIG
            | Presence.SATINUSECOUNT | Presence.HDOP | Presence.ELV
        )

    def test_fractional_time(self):
        result = parse_gga("$GPGGA,123519.50,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*6C")
        assert result is not None and result.hsec == 50

    def test_no_fix_empty_fields(self):
        result = parse_gga("$GPGGA,123519,,,,,0,00,,,,,,,*6B")
        assert result is not None
        assert result.latitude == 0.0 and result.ns == ""
        assert result.sig == 0 and result.satinuse == 0
        assert result.present == Presence.UTCTIME | Presence.SIG | Presence.SATINUSECOUNT

    def test_hemisphere_letters_are_kept_unsigned(self):
        result = parse_gga("$GPGGA,123519,3356.123,S,15112.456,W,2,10,0.8,100.0,M,20.0,M,,*4B")
        assert result is not None
        assert result.latitude == pytest.approx(3356.123) and result.ns == "S"
        assert result.longitude == pytest.approx(15112.456) and result.ew == "W"

    def test_gga_malformed_too_few_fields(self):
        assert parse_gga("$GPGGA,123519,4807.038,N*27") is None

    def test_gga_invalid_time(self):
        assert parse_gga("$GPGGA,1235,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*4F") is None

    def test_gga_wrong_talker(self):
        assert parse_gga("$GNGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*59") is None

    def test_gga_wrong_sentence_type(self):
        assert parse_gga("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48") is None

    def test_bytes_sentence(self):
        assert parse_gga(GGA_VALID.encode("ascii")) is not None

    def test_failure_is_logged(self, caplog):
        log = logging.getLogger("tests.gga")
        with caplog.at_level(logging.DEBUG, logger="tests.gga"):
            assert parse_gga("$GPGGA,123519,4807.038,N*27", log) is None
        assert any(r.levelno == logging.WARNING and "GPGGA" in r.getMessage() for r in caplog.records)
        assert all(r.name == "tests.gga" for r in caplog.records)
