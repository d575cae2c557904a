"""NMEA field conversion utilities.

NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). The converters below turn a single raw token into a Python
value and return None when the token cannot be converted, which lets the
token scanner stop at the first malformed field.

Only plain digits are accepted: whitespace, underscores and (for integers)
signs make a field invalid even where Python's own ``int``/``float`` would
take them.
"""

import math
import re

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
_DIGITS = {
    10: re.compile(r"[0-9]+"),
    16: re.compile(r"[0-9A-Fa-f]+"),
}


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty or invalid.

    A leading sign is allowed since some receivers report negative DOPs.
    Values too large to be finite are rejected.

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("5_4.7") is None
        True
    """
    if not value or not _DECIMAL.fullmatch(value):
        return None
    result = float(value)
    if not math.isfinite(result):
        return None
    return result


def parse_int_field(value: str, base: int = 10) -> int | None:
    """Parse an unsigned string field to int, returning None if empty or invalid.

    Used for satellite PRNs, counts, and the ``hhmmss`` digit pairs. Pass
    ``base=16`` for hexadecimal fields such as the checksum.

    Example:
        >>> parse_int_field("08")
        8
        >>> parse_int_field("7F", base=16)
        127
        >>> parse_int_field("-5") is None
        True
    """
    if not value or not _DIGITS[base].fullmatch(value):
        return None
    return int(value, base)


def parse_string_field(value: str) -> str | None:
    """Parse a string field, returning None if empty.

    Example:
        >>> parse_string_field("123519.00")
        '123519.00'
        >>> parse_string_field("")
        None
    """
    if not value:
        return None
    return value


def apply_hemisphere(value: float, direction: str) -> float:
    """Apply the hemisphere sign to an NMEA coordinate.

    North/East stay positive, South/West become negative. The value itself
    is left in NDEG form; no conversion to decimal degrees takes place.

    Example:
        >>> apply_hemisphere(4807.038, "N")
        4807.038
        >>> apply_hemisphere(1131.0, "W")
        -1131.0
    """
    if direction in ("S", "W"):
        return -value
    return value
