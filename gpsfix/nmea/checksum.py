"""NMEA frame extraction and checksum validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit hexadecimal number after the '*'. A complete
frame ends with CR LF.

Example sentence structure:
    $GPGSA,A,3,04,05,,,09,12,,,24,,,,2.5,1.3,2.1*39\\r\\n
     ^            checksum content             ^^^ ^^^^
     start                                checksum  tail
"""

import string

__all__ = ["calculate_checksum", "find_tail"]

# "*" + two hex digits + "\r\n"
_TAIL_SIZE = 5

_DOLLAR = ord("$")
_ASTERISK = ord("*")
_HEX_DIGITS = frozenset(string.hexdigits.encode("ascii"))


def _as_bytes(buffer: str | bytes | bytearray) -> bytes:
    if isinstance(buffer, str):
        return buffer.encode("latin-1", errors="replace")
    return bytes(buffer)


def calculate_checksum(content: str | bytes) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the value of each character in the
    content, i.e. everything between '$' and '*'.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)
    """
    result = 0
    for byte in _as_bytes(content):
        result ^= byte
    return result


def find_tail(buffer: str | bytes | bytearray) -> tuple[int, int]:
    """Find the end of the sentence that starts the buffer and verify it.

    The scan walks forward from the first byte (normally '$'), XOR-ing every
    byte after it. It stops at the first '*', which must be followed by two
    hex digits and CR LF. A '$' found after the first byte means a new
    sentence starts before this one ended, so there is no valid frame here.

    Args:
        buffer: Raw bytes beginning at a sentence start.

    Returns:
        Tuple of (consumed, checksum). ``consumed`` is the frame length up to
        and including the LF, ``checksum`` the verified checksum value. When
        no valid frame is found (embedded '$', truncated buffer, missing
        CR LF, non-hex digits, or checksum mismatch) returns ``(0, -1)``.

    Example:
        >>> find_tail(b"$GPVTG,,T,,M,,N,,K*4E\\r\\n$GPGGA")
        (23, 78)
    """
    data = _as_bytes(buffer)
    checksum = 0

    for position, byte in enumerate(data):
        if byte == _DOLLAR and position:
            return 0, -1

        if byte == _ASTERISK:
            tail = data[position : position + _TAIL_SIZE]
            if len(tail) != _TAIL_SIZE or tail[3:] != b"\r\n":
                return 0, -1
            if not all(digit in _HEX_DIGITS for digit in tail[1:3]):
                return 0, -1
            if int(tail[1:3], 16) != checksum:
                return 0, -1
            return position + _TAIL_SIZE, checksum

        if position:
            checksum ^= byte

    return 0, -1
