"""Sentence type detection from the talker+sentence tag."""

from gpsfix.nmea.types import PackType

__all__ = ["pack_type"]

# Tags are exactly 5 characters and compared case-sensitively
_TAG_LENGTH = 5

_PACK_TYPES: dict[str, PackType] = {
    "GPGGA": PackType.GPGGA,
    "GPGSA": PackType.GPGSA,
    "GPGSV": PackType.GPGSV,
    "GPRMC": PackType.GPRMC,
    "GPVTG": PackType.GPVTG,
}


def pack_type(buffer: str | bytes) -> PackType:
    """Identify the sentence type from the first five characters of a buffer.

    A leading '$' is skipped, so both a full sentence and a bare sentence
    body are accepted.

    Args:
        buffer: Sentence text or raw bytes.

    Returns:
        The matching ``PackType``, or ``PackType.NONE`` when the buffer is
        shorter than a tag or carries an unsupported tag. An unknown tag is
        a normal outcome, not an error.

    Example:
        >>> pack_type("$GPGSA,A,3,...")
        <PackType.GPGSA: 2>
        >>> pack_type("GNGSA,A,3,...")
        <PackType.NONE: 0>
    """
    if isinstance(buffer, (bytes, bytearray)):
        buffer = bytes(buffer).decode("latin-1")

    if buffer.startswith("$"):
        buffer = buffer[1:]

    if len(buffer) < _TAG_LENGTH:
        return PackType.NONE

    return _PACK_TYPES.get(buffer[:_TAG_LENGTH], PackType.NONE)
