"""RMC sentence parser.

RMC (Recommended Minimum Specific GNSS Data) combines time, date, position,
speed and track with a validity status:

    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A

Older receivers send 12 fields after the tag; NMEA 2.3 added a trailing FAA
mode indicator, so both 13 and 14 scanned tokens are accepted (the date
counts as three tokens: day, month, year).

Date normalization:
    Two-digit years below 90 are taken to be 20xx. The year is stored as
    years since 1900 and the month is zero-based.
"""

import logging

from gpsfix.nmea.scanner import scan
from gpsfix.nmea.types import Presence, RMCPacket
from gpsfix.nmea.utctime import parse_time

__all__ = ["parse_rmc"]

logger = logging.getLogger(__name__)

_TEMPLATE = "$GPRMC,%s,%C,%f,%C,%f,%C,%f,%f,%2d%2d%2d,%f,%C,%C*"
_TOKEN_COUNTS = (13, 14)

_CENTURY_PIVOT = 90


def parse_rmc(sentence: str | bytes, log: logging.Logger | None = None) -> RMCPacket | None:
    """Parse an RMC sentence into an ``RMCPacket``.

    Returns:
        RMCPacket, or None when the field count is not 13 or 14 or the time
        field is malformed.
    """
    log = log or logger
    log.debug("GPRMC: %r", sentence)

    tokens = scan(sentence, _TEMPLATE)
    if len(tokens) not in _TOKEN_COUNTS:
        log.warning("GPRMC parse error: need 13 or 14 tokens, got %d in %r", len(tokens), sentence)
        return None

    time = parse_time(tokens[0])
    if time is None:
        log.warning("GPRMC parse error: invalid time %r in %r", tokens[0], sentence)
        return None

    (_, status, lat, ns, lon, ew, speed, direction, day, month, year,
     declination, declination_ew) = tokens[:13]
    mode = tokens[13] if len(tokens) == 14 else None

    if year < _CENTURY_PIVOT:
        year += 100

    present = Presence.UTCTIME | Presence.UTCDATE
    if lat is not None and ns is not None:
        present |= Presence.LAT
    if lon is not None and ew is not None:
        present |= Presence.LON
    if speed is not None:
        present |= Presence.SPEED
    if direction is not None:
        present |= Presence.TRACK
    if declination is not None and declination_ew is not None:
        present |= Presence.MAGVAR

    return RMCPacket(
        year=year,
        month=month - 1,
        day=day,
        hour=time.hour,
        minute=time.minute,
        second=time.second,
        hsec=time.hsec,
        status=status or "",
        latitude=lat or 0.0,
        ns=ns or "",
        longitude=lon or 0.0,
        ew=ew or "",
        speed=speed or 0.0,
        direction=direction or 0.0,
        declination=declination or 0.0,
        declination_ew=declination_ew or "",
        mode=mode or "",
        present=present,
    )
