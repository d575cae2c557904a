"""GSV sentence parser.

GSV (GNSS Satellites in View) lists the satellites the receiver can see,
four per sentence. A full list spans several sentences that share the same
pack count and satellite total:

    $GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75
           | | |  |  |  |   |
           | | |  +--+--+---+-- Satellite: PRN, elevation, azimuth, SNR
           | | |                (repeated up to four times)
           | | +-- Total satellites in view
           | +-- Index of this sentence (1-based)
           +-- Number of sentences in the cycle

The last sentence of a cycle may carry fewer than four satellites, so the
accepted field count depends on how many satellites remain for it.
"""

import logging

from gpsfix.nmea.scanner import scan
from gpsfix.nmea.types import SATELLITES_PER_GSV, GSVPacket, Presence, Satellite

__all__ = ["parse_gsv"]

logger = logging.getLogger(__name__)

_HEADER_FIELDS = 3
_SATELLITE_FIELDS = 4

_TEMPLATE = "$GPGSV,%d,%d,%d," + ",".join(["%d,%d,%d,%d"] * SATELLITES_PER_GSV) + "*"
_MAXIMUM_TOKEN_COUNT = _HEADER_FIELDS + _SATELLITE_FIELDS * SATELLITES_PER_GSV


def _minimum_token_count(pack_index: int, sat_count: int) -> int:
    """Number of fields the sentence at ``pack_index`` must at least carry."""
    remaining = sat_count - (pack_index - 1) * SATELLITES_PER_GSV
    return _HEADER_FIELDS + _SATELLITE_FIELDS * min(remaining, SATELLITES_PER_GSV)


def parse_gsv(sentence: str | bytes, log: logging.Logger | None = None) -> GSVPacket | None:
    """Parse one GSV sentence into a ``GSVPacket``.

    Returns:
        GSVPacket, or None when the field count falls outside the range
        allowed for this sentence's position in its cycle.
    """
    log = log or logger
    log.debug("GPGSV: %r", sentence)

    tokens = scan(sentence, _TEMPLATE)
    count = len(tokens)
    tokens += [None] * (_MAXIMUM_TOKEN_COUNT - count)

    pack_count, pack_index, sat_count = (token or 0 for token in tokens[:_HEADER_FIELDS])

    minimum = _minimum_token_count(pack_index, sat_count)
    if not minimum <= count <= _MAXIMUM_TOKEN_COUNT:
        log.warning(
            "GPGSV parse error: need %d to %d tokens, got %d in %r",
            minimum, _MAXIMUM_TOKEN_COUNT, count, sentence,
        )
        return None

    satellites = []
    for offset in range(_HEADER_FIELDS, _MAXIMUM_TOKEN_COUNT, _SATELLITE_FIELDS):
        prn, elevation, azimuth, sig = tokens[offset : offset + _SATELLITE_FIELDS]
        satellites.append(
            Satellite(id=prn or 0, elevation=elevation or 0, azimuth=azimuth or 0, sig=sig or 0)
        )

    present = Presence(0)
    if tokens[2] is not None:
        present |= Presence.SATINVIEW

    return GSVPacket(
        pack_count=pack_count,
        pack_index=pack_index,
        sat_count=sat_count,
        satellites=satellites,
        present=present,
    )
