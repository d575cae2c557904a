"""VTG sentence parser.

VTG (Track Made Good and Ground Speed) provides velocity information.

VTG Sentence Format:
    $GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48
           |     | |     | |     | |     |
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

The unit letters T, M, N and K are fixed by the format. They carry no data
and act as a self-check: a sentence with any other letter is rejected. An
NMEA 2.3 mode indicator after the 'K' field is tolerated and ignored.

When only one of the two speeds is given, the other is derived from it, so
a present speed is always available in km/h.
"""

import logging

from gpsfix.nmea.scanner import scan
from gpsfix.nmea.types import KNOTS_TO_KILOMETERS_PER_HOUR, Presence, VTGPacket

__all__ = ["parse_vtg"]

logger = logging.getLogger(__name__)

_TEMPLATE = "$GPVTG,%f,%C,%f,%C,%f,%C,%f,%C*"
_TOKEN_COUNT = 8

_UNIT_LETTERS = ("T", "M", "N", "K")


def parse_vtg(sentence: str | bytes, log: logging.Logger | None = None) -> VTGPacket | None:
    """Parse a VTG sentence into a ``VTGPacket``.

    Returns:
        VTGPacket, or None when the sentence does not carry 8 fields or a
        unit letter differs from T, M, N, K.
    """
    log = log or logger
    log.debug("GPVTG: %r", sentence)

    tokens = scan(sentence, _TEMPLATE)
    if len(tokens) != _TOKEN_COUNT:
        log.warning("GPVTG parse error: need %d tokens, got %d in %r", _TOKEN_COUNT, len(tokens), sentence)
        return None

    direction, direction_t, declination, declination_m, knots, knots_n, kph, kph_k = tokens

    if (direction_t, declination_m, knots_n, kph_k) != _UNIT_LETTERS:
        log.warning("GPVTG parse error (format error): unexpected unit letters in %r", sentence)
        return None

    present = Presence(0)
    if direction is not None:
        present |= Presence.TRACK
    if declination is not None:
        present |= Presence.MTRACK
    if knots is not None or kph is not None:
        present |= Presence.SPEED

    # Derive whichever speed is missing
    if kph is None and knots is not None:
        kph = knots * KNOTS_TO_KILOMETERS_PER_HOUR
    elif knots is None and kph is not None:
        knots = kph / KNOTS_TO_KILOMETERS_PER_HOUR

    return VTGPacket(
        direction=direction or 0.0,
        direction_t=direction_t,
        declination=declination or 0.0,
        declination_m=declination_m,
        speed_knots=knots or 0.0,
        speed_knots_n=knots_n,
        speed_kph=kph or 0.0,
        speed_kph_k=kph_k,
        present=present,
    )
