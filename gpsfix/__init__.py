"""gpsfix package for decoding NMEA 0183 GPS sentences into a fix snapshot."""

import logging

from gpsfix.fix import FixInfo, NMEAParser, info_to_gsa, merge_packet
from gpsfix.nmea import (
    Fix,
    GGAPacket,
    GSAPacket,
    GSVPacket,
    PackType,
    Presence,
    RMCPacket,
    Signal,
    VTGPacket,
    decode_sentence,
    find_tail,
    generate_sentence,
    pack_type,
    parse_gga,
    parse_gsa,
    parse_gsv,
    parse_rmc,
    parse_time,
    parse_vtg,
    scan,
)

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Fix",
    "FixInfo",
    "GGAPacket",
    "GSAPacket",
    "GSVPacket",
    "NMEAParser",
    "PackType",
    "Presence",
    "RMCPacket",
    "Signal",
    "VTGPacket",
    "decode_sentence",
    "find_tail",
    "generate_sentence",
    "info_to_gsa",
    "merge_packet",
    "pack_type",
    "parse_gga",
    "parse_gsa",
    "parse_gsv",
    "parse_rmc",
    "parse_time",
    "parse_vtg",
    "scan",
]
