"""NMEA 0183 framing, tokenizing, decoding and generation for GGA, GSA, GSV, RMC and VTG sentences."""

from gpsfix.nmea.checksum import calculate_checksum, find_tail
from gpsfix.nmea.decode import decode_sentence
from gpsfix.nmea.generate import format_sentence, generate_sentence
from gpsfix.nmea.gga import parse_gga
from gpsfix.nmea.gsa import parse_gsa, prn_sort_key
from gpsfix.nmea.gsv import parse_gsv
from gpsfix.nmea.packtype import pack_type
from gpsfix.nmea.rmc import parse_rmc
from gpsfix.nmea.scanner import scan
from gpsfix.nmea.types import (
    GSA_SATELLITES,
    KNOTS_TO_KILOMETERS_PER_HOUR,
    MAX_SATELLITES,
    SATELLITES_PER_GSV,
    Fix,
    GGAPacket,
    GSAPacket,
    GSVPacket,
    Packet,
    PackType,
    Presence,
    RMCPacket,
    Satellite,
    Signal,
    VTGPacket,
)
from gpsfix.nmea.utctime import TimeOfDay, parse_time
from gpsfix.nmea.vtg import parse_vtg

__all__ = [
    "GSA_SATELLITES",
    "KNOTS_TO_KILOMETERS_PER_HOUR",
    "MAX_SATELLITES",
    "SATELLITES_PER_GSV",
    "Fix",
    "GGAPacket",
    "GSAPacket",
    "GSVPacket",
    "PackType",
    "Packet",
    "Presence",
    "RMCPacket",
    "Satellite",
    "Signal",
    "TimeOfDay",
    "VTGPacket",
    "calculate_checksum",
    "decode_sentence",
    "find_tail",
    "format_sentence",
    "generate_sentence",
    "pack_type",
    "parse_gga",
    "parse_gsa",
    "parse_gsv",
    "parse_rmc",
    "parse_time",
    "parse_vtg",
    "prn_sort_key",
    "scan",
]
