"""Tests for NMEAParser."""

import logging

import pytest

from gpsfix.fix import FixInfo, NMEAParser
from gpsfix.nmea import Fix, PackType, Presence, Signal

GGA_VALID = b"$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47\r\n"
GSA_VALID = b"$GPGSA,A,3,04,05,,,09,12,,,24,,,,2.5,1.3,2.1*39\r\n"
GSV_1_OF_2 = b"$GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75\r\n"
GSV_2_OF_2 = b"$GPGSV,2,2,08,15,11,045,38,17,33,150,42,19,55,270,44,22,05,010,*72\r\n"
RMC_VALID = b"$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A\r\n"
VTG_VALID = b"$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48\r\n"
ZDA_VALID = b"$GPZDA,123519,23,03,1994,00,00*42\r\n"

SESSION = GSV_1_OF_2 + GSV_2_OF_2 + GGA_VALID + GSA_VALID + RMC_VALID + VTG_VALID


class TestNMEAParser:
    """Tests for NMEAParser class."""

    def test_full_session(self):
        parser = NMEAParser()
        assert parser.parse(SESSION) == 6

        info = parser.info
        assert info.smask == (
            PackType.GPGGA | PackType.GPGSA | PackType.GPGSV | PackType.GPRMC | PackType.GPVTG
        )
        assert info.sig == Signal.LOW
        assert info.fix == Fix.FIX_3D
        assert info.latitude == pytest.approx(4807.038)
        assert info.longitude == pytest.approx(1131.0)
        assert info.elevation == pytest.approx(545.4)
        assert (info.utc.year, info.utc.month, info.utc.day) == (94, 2, 23)
        assert info.speed == pytest.approx(10.2)
        assert info.direction == pytest.approx(54.7)
        assert info.satinfo.inview == 8
        assert info.satinfo.inuse == 1
        assert [sat.id for sat in info.satinfo.satellites if sat.in_use] == [12]
        assert Presence.SMASK in info.present

    def test_str_buffer(self):
        parser = NMEAParser()
        assert parser.parse(VTG_VALID.decode("ascii")) == 1
        assert parser.info.speed == pytest.approx(10.2)

    def test_str_noise_outside_latin1(self):
        parser = NMEAParser()
        assert parser.parse("noise °℃ $GPVTG,,T,,M,,N,,K*4E\r\n") == 1
        assert parser.parse("$GPVTG,℃,T,,M,,N,,K*4E\r\n") == 0

    def test_corrupted_frame_is_skipped(self, caplog):
        corrupted = GGA_VALID.replace(b"*47", b"*48")
        parser = NMEAParser()
        with caplog.at_level(logging.DEBUG, logger="gpsfix"):
            assert parser.parse(corrupted + VTG_VALID) == 1
        assert parser.info.smask == PackType.GPVTG
        assert any("No valid frame" in r.getMessage() for r in caplog.records)

    def test_leading_garbage_is_skipped(self):
        parser = NMEAParser()
        assert parser.parse(b"\x00\xffnoise," + VTG_VALID) == 1

    def test_truncated_frame_is_skipped(self):
        parser = NMEAParser()
        assert parser.parse(b"$GPGGA,123519,4807" + VTG_VALID) == 1
        assert parser.info.smask == PackType.GPVTG

    def test_frame_without_line_end(self):
        assert NMEAParser().parse(VTG_VALID.rstrip()) == 0

    def test_unsupported_sentence_is_skipped(self):
        parser = NMEAParser()
        assert parser.parse(ZDA_VALID + VTG_VALID) == 1

    def test_undecodable_sentence_is_warned(self, caplog):
        parser = NMEAParser()
        with caplog.at_level(logging.DEBUG, logger="gpsfix"):
            assert parser.parse(b"$GPVTG,054.7,T*2E\r\n") == 0
        assert any(r.levelno == logging.WARNING for r in caplog.records)
        assert parser.info == FixInfo()

    def test_empty_buffer(self):
        assert NMEAParser().parse(b"") == 0

    def test_injected_logger(self, caplog):
        log = logging.getLogger("tests.rover")
        parser = NMEAParser(logger=log)
        assert parser.logger is log
        with caplog.at_level(logging.DEBUG, logger="tests.rover"):
            parser.parse(VTG_VALID)
        assert any(r.name == "tests.rover" and "GPVTG" in r.getMessage() for r in caplog.records)

    def test_logger_reset_to_default(self):
        parser = NMEAParser(logger=logging.getLogger("tests.rover"))
        parser.logger = None
        assert parser.logger is logging.getLogger("gpsfix.fix.parser")

    def test_uses_given_snapshot(self):
        info = FixInfo()
        parser = NMEAParser(info=info)
        parser.parse(VTG_VALID)
        assert parser.info is info
        assert info.speed == pytest.approx(10.2)

    def test_reset(self):
        parser = NMEAParser()
        parser.parse(SESSION)
        parser.reset()
        assert parser.info == FixInfo()
