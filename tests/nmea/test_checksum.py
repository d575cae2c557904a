"""Tests for NMEA frame extraction and checksum calculation."""

from gpsfix.nmea import calculate_checksum, find_tail

GSA_FRAME = b"$GPGSA,A,3,04,05,,,09,12,,,24,,,,2.5,1.3,2.1*39\r\n"
VTG_FRAME = b"$GPVTG,,T,,M,,N,,K*4E\r\n"


class TestFindTail:
    """Tests for find_tail function."""

    def test_valid_frame(self):
        assert find_tail(GSA_FRAME) == (len(GSA_FRAME), 0x39)

    def test_trailing_bytes_are_not_consumed(self):
        assert find_tail(VTG_FRAME + b"$GPGGA,1") == (len(VTG_FRAME), 0x4E)

    def test_checksum_mismatch_consumes_nothing(self):
        frame = GSA_FRAME.replace(b"*39", b"*00")
        assert find_tail(frame) == (0, -1)

    def test_every_wrong_checksum_consumes_nothing(self):
        for value in range(256):
            if value == 0x39:
                continue
            frame = GSA_FRAME.replace(b"*39", b"*%02X" % value)
            assert find_tail(frame) == (0, -1), f"Accepted checksum {value:02X}"

    def test_lowercase_hex_digits(self):
        assert find_tail(VTG_FRAME.replace(b"4E", b"4e")) == (len(VTG_FRAME), 0x4E)

    def test_non_hex_digits(self):
        assert find_tail(VTG_FRAME.replace(b"4E", b"4G")) == (0, -1)

    def test_missing_crlf(self):
        assert find_tail(VTG_FRAME.rstrip()) == (0, -1)

    def test_bare_lf_is_not_a_tail(self):
        assert find_tail(VTG_FRAME.replace(b"\r\n", b"\n ")) == (0, -1)

    def test_truncated_checksum(self):
        assert find_tail(b"$GPVTG,,T,,M,,N,,K*4") == (0, -1)

    def test_embedded_sentence_start(self):
        assert find_tail(b"$GPGSA,A,3,0$GPVTG,,T,,M,,N,,K*4E\r\n") == (0, -1)

    def test_no_asterisk(self):
        assert find_tail(b"$GPVTG,,T,,M,,N,,K") == (0, -1)

    def test_empty_buffer(self):
        assert find_tail(b"") == (0, -1)

    def test_str_buffer(self):
        assert find_tail(VTG_FRAME.decode("ascii")) == (len(VTG_FRAME), 0x4E)

    def test_str_buffer_outside_latin1(self):
        assert find_tail("$GP℃*00\r\n") == (0, -1)


class TestCalculateChecksum:
    """Tests for calculate_checksum function."""

    def test_known_content(self):
        assert calculate_checksum("GPVTG,,T,,M,,N,,K") == 0x4E

    def test_bytes_content(self):
        assert calculate_checksum(b"GPGSA,A,3,04,05,,,09,12,,,24,,,,2.5,1.3,2.1") == 0x39

    def test_empty_content(self):
        assert calculate_checksum("") == 0

    def test_characters_outside_latin1(self):
        assert calculate_checksum("GP℃") == calculate_checksum("GP?")
