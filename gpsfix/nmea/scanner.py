"""Template-driven token scanner for NMEA sentences.

Every sentence decoder describes its sentence as a template made of literal
text and typed placeholders, then checks how many placeholders the scanner
managed to fill. That count is the single validation primitive shared by
all decoders.

Template syntax:
    Literal characters must match the buffer exactly. A placeholder is
    ``%`` followed by an optional decimal width and a type letter:

        c, C   one character
        s      string
        d, i   decimal integer
        x      hexadecimal integer
        f      floating point number

    A placeholder without a width extends to the next literal character of
    the template. It also stops at ``*``, which NMEA reserves as the start of
    the checksum and which therefore never occurs inside a field. A
    placeholder with a width consumes exactly that many characters.

Example:
    >>> scan("$GPVTG,054.7,T,,M*", "$GPVTG,%f,%C,%f,%C*")
    [54.7, 'T', None, 'M']
"""

from collections.abc import Callable
from typing import Any

from gpsfix.nmea.fields import parse_float_field, parse_int_field, parse_string_field

__all__ = ["scan"]

CHECKSUM_MARKER = "*"


def _parse_hex_field(value: str) -> int | None:
    return parse_int_field(value, base=16)


_CONVERTERS: dict[str, Callable[[str], Any]] = {
    "c": parse_string_field,
    "C": parse_string_field,
    "s": parse_string_field,
    "d": parse_int_field,
    "i": parse_int_field,
    "x": _parse_hex_field,
    "f": parse_float_field,
}


def _find_token_end(buffer: str, start: int, terminator: str | None) -> int:
    """Return the index where a width-less token starting at ``start`` ends.

    The token ends at the first ``terminator`` or checksum marker, whichever
    comes first, or at the end of the buffer when neither occurs.
    """
    if terminator is None:
        return len(buffer)
    end = len(buffer)
    for stop in {terminator, CHECKSUM_MARKER}:
        found = buffer.find(stop, start)
        if found != -1 and found < end:
            end = found
    return end


def _read_placeholder(template: str, index: int) -> tuple[int, str, int]:
    """Decode the placeholder whose first character follows the ``%``.

    Returns:
        Tuple of (width, type letter, index just past the type letter).
        A width of 0 means "no width given".

    Raises:
        ValueError: If the template is malformed. Templates are fixed
            strings owned by the decoders, so this is a programming error.
    """
    width_start = index
    while index < len(template) and template[index].isdigit():
        index += 1
    width = int(template[width_start:index]) if index > width_start else 0

    if index >= len(template) or template[index] not in _CONVERTERS:
        raise ValueError(f"Invalid placeholder in template: {template!r}")

    return width, template[index], index + 1


def scan(buffer: str | bytes, template: str) -> list[Any]:
    """Scan ``buffer`` against ``template`` and return the matched tokens.

    Args:
        buffer: Sentence text. Bytes are decoded as Latin-1 so that every
            byte maps to exactly one character.
        template: Literal text with typed placeholders (see module docstring).

    Returns:
        One value per matched placeholder, in template order. An empty field
        is a valid match and contributes ``None``. Scanning stops early, and
        the shorter list is returned, when the buffer runs out, a literal
        does not match, or a token cannot be converted to its type. Callers
        compare ``len(result)`` against the number of placeholders they
        expect.
    """
    if isinstance(buffer, (bytes, bytearray)):
        buffer = bytes(buffer).decode("latin-1")

    tokens: list[Any] = []
    position = 0
    index = 0
    end = len(buffer)

    while index < len(template) and position < end:
        if template[index] != "%":
            if buffer[position] != template[index]:
                break
            position += 1
            index += 1
            continue

        width, kind, index = _read_placeholder(template, index + 1)
        terminator = template[index] if index < len(template) else None
        start = position

        if width:
            if position + width > end:
                break
            position += width
        elif kind in "cC":
            if buffer[position] not in (terminator, CHECKSUM_MARKER):
                position += 1
        else:
            position = _find_token_end(buffer, position, terminator)

        raw = buffer[start:position]
        if not raw:
            tokens.append(None)
            continue

        value = _CONVERTERS[kind](raw)
        if value is None:
            break
        tokens.append(value)

    return tokens
