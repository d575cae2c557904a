"""GGA sentence parser.

GGA (Global Positioning System Fix Data) provides the position fix, its
quality, the number of satellites in use and the altitude.

GGA Sentence Format:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
           |      |        | |         | | |  |   |     | |    | ||
           |      |        | |         | | |  |   |     | |    | |+-- DGPS station id
           |      |        | |         | | |  |   |     | |    | +-- DGPS age (s)
           |      |        | |         | | |  |   |     | +----+-- Geoid separation
           |      |        | |         | | |  |   +-----+-- Altitude above MSL
           |      |        | |         | | |  +-- HDOP
           |      |        | |         | | +-- Number of satellites in use
           |      |        | |         | +-- Quality indicator (0-8)
           |      |        | +---------+-- Longitude (dddmm.mmmm) + E/W
           |      +--------+-- Latitude (ddmm.mmmm) + N/S
           +-- UTC time (hhmmss[.s{1,3}])

Hemisphere letters are kept as decoded; the sign is applied when the packet
is merged into a fix snapshot.
"""

import logging

from gpsfix.nmea.scanner import scan
from gpsfix.nmea.types import GGAPacket, Presence
from gpsfix.nmea.utctime import parse_time

__all__ = ["parse_gga"]

logger = logging.getLogger(__name__)

_TEMPLATE = "$GPGGA,%s,%f,%C,%f,%C,%d,%d,%f,%f,%C,%f,%C,%f,%d*"
_TOKEN_COUNT = 14


def _presence(tokens: list) -> Presence:
    (_, lat, ns, lon, ew, sig, satinuse, hdop, elv) = tokens[:9]

    present = Presence.UTCTIME
    if lat is not None and ns is not None:
        present |= Presence.LAT
    if lon is not None and ew is not None:
        present |= Presence.LON
    if sig is not None:
        present |= Presence.SIG
    if satinuse is not None:
        present |= Presence.SATINUSECOUNT
    if hdop is not None:
        present |= Presence.HDOP
    if elv is not None:
        present |= Presence.ELV
    return present


def parse_gga(sentence: str | bytes, log: logging.Logger | None = None) -> GGAPacket | None:
    """Parse a GGA sentence into a ``GGAPacket``.

    Args:
        sentence: A complete, checksum-verified sentence starting with
            "$GPGGA,". Anything after the '*' is ignored.
        log: Logger receiving the trace and error records. Defaults to this
            module's logger.

    Returns:
        GGAPacket, or None if the sentence does not carry exactly 14 fields
        or its time field is malformed.
    """
    log = log or logger
    log.debug("GPGGA: %r", sentence)

    tokens = scan(sentence, _TEMPLATE)
    if len(tokens) != _TOKEN_COUNT:
        log.warning("GPGGA parse error: need %d tokens, got %d in %r", _TOKEN_COUNT, len(tokens), sentence)
        return None

    time = parse_time(tokens[0])
    if time is None:
        log.warning("GPGGA parse error: invalid time %r in %r", tokens[0], sentence)
        return None

    (_, lat, ns, lon, ew, sig, satinuse, hdop, elv, elv_units,
     diff, diff_units, dgps_age, dgps_sid) = tokens

    return GGAPacket(
        hour=time.hour,
        minute=time.minute,
        second=time.second,
        hsec=time.hsec,
        latitude=lat or 0.0,
        ns=ns or "",
        longitude=lon or 0.0,
        ew=ew or "",
        sig=sig or 0,
        satinuse=satinuse or 0,
        hdop=hdop or 0.0,
        elevation=elv or 0.0,
        elevation_units=elv_units or "",
        diff=diff or 0.0,
        diff_units=diff_units or "",
        dgps_age=dgps_age or 0.0,
        dgps_sid=dgps_sid or 0,
        present=_presence(tokens),
    )
