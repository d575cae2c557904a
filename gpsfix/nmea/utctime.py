"""Shared UTC time-of-day decoder for GGA and RMC sentences.

Receivers report the time of day with zero to three fractional digits. The
length of the field alone selects the format:

    6 chars   hhmmss
    8 chars   hhmmss.s
    9 chars   hhmmss.ss
    10 chars  hhmmss.sss

The fractional part is always normalized to hundredths of a second, so
"123519.5", "123519.50" and "123519.500" all decode to hsec=50.
"""

from typing import NamedTuple

from gpsfix.nmea.scanner import scan

__all__ = ["TimeOfDay", "parse_time"]


class TimeOfDay(NamedTuple):
    hour: int
    minute: int
    second: int
    hsec: int


# length -> (template, expected token count, hsec multiplier, hsec divisor)
_FORMATS: dict[int, tuple[str, int, int, int]] = {
    len("hhmmss"): ("%2d%2d%2d", 3, 1, 1),
    len("hhmmss.s"): ("%2d%2d%2d.%d", 4, 10, 1),
    len("hhmmss.ss"): ("%2d%2d%2d.%d", 4, 1, 1),
    len("hhmmss.sss"): ("%2d%2d%2d.%d", 4, 1, 10),
}


def parse_time(value: str | None) -> TimeOfDay | None:
    """Decode an NMEA time-of-day field.

    Args:
        value: The raw time field, e.g. "123519.00".

    Returns:
        ``TimeOfDay`` with the fraction expressed in hundredths of a second,
        or None when the length matches no known format or the digits do
        not scan.

    Example:
        >>> parse_time("123519.5")
        TimeOfDay(hour=12, minute=35, second=19, hsec=50)
        >>> parse_time("1235") is None
        True
    """
    if not value or len(value) not in _FORMATS:
        return None

    template, expected, multiplier, divisor = _FORMATS[len(value)]
    tokens = scan(value, template)
    if len(tokens) != expected or None in tokens:
        return None

    hour, minute, second = tokens[:3]
    hsec = tokens[3] * multiplier // divisor if expected == 4 else 0
    return TimeOfDay(hour, minute, second, hsec)
