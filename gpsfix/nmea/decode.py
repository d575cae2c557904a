"""Tag-based dispatch from a sentence to its decoder."""

import logging
from collections.abc import Callable

from gpsfix.nmea.gga import parse_gga
from gpsfix.nmea.gsa import parse_gsa
from gpsfix.nmea.gsv import parse_gsv
from gpsfix.nmea.packtype import pack_type
from gpsfix.nmea.rmc import parse_rmc
from gpsfix.nmea.types import Packet, PackType
from gpsfix.nmea.vtg import parse_vtg

__all__ = ["decode_sentence"]

logger = logging.getLogger(__name__)

_DECODERS: dict[PackType, Callable[..., Packet | None]] = {
    PackType.GPGGA: parse_gga,
    PackType.GPGSA: parse_gsa,
    PackType.GPGSV: parse_gsv,
    PackType.GPRMC: parse_rmc,
    PackType.GPVTG: parse_vtg,
}


def decode_sentence(sentence: str | bytes, log: logging.Logger | None = None) -> Packet | None:
    """Decode a checksum-verified sentence with the decoder matching its tag.

    Returns:
        The decoded packet, or None when the tag is not supported or the
        sentence fails to decode. Unsupported tags are only traced at DEBUG
        level since receivers routinely emit sentence types nobody asked for.
    """
    log = log or logger

    decoder = _DECODERS.get(pack_type(sentence))
    if decoder is None:
        log.debug("Skipping unsupported sentence %r", sentence)
        return None

    return decoder(sentence, log)
