"""Fix module for aggregating decoded NMEA sentences into one positioning snapshot."""

from gpsfix.fix.aggregator import (
    info_to_gsa,
    merge_gga,
    merge_gsa,
    merge_gsv,
    merge_packet,
    merge_rmc,
    merge_vtg,
)
from gpsfix.fix.parser import NMEAParser
from gpsfix.fix.types import FixInfo, SatInfo, TrackedSatellite, UTCTime

__all__ = [
    "FixInfo",
    "NMEAParser",
    "SatInfo",
    "TrackedSatellite",
    "UTCTime",
    "info_to_gsa",
    "merge_gga",
    "merge_gsa",
    "merge_gsv",
    "merge_packet",
    "merge_rmc",
    "merge_vtg",
]
