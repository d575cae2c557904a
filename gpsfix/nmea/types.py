"""NMEA data types for decoded sentences.

This module defines the packet dataclasses produced by the sentence decoders,
the presence bitmask that records which optional fields a sentence actually
supplied, and the protocol constants shared by decoders and the aggregator.

Design Decisions:
    1. Zero defaults plus a presence mask: every packet starts out as the
       zero-initialized record. A field that was empty on the wire keeps its
       default value and its ``Presence`` bit stays clear, so "no data
       received" remains distinguishable from "measured zero".

    2. Hemisphere letters are kept as decoded. Packets never apply signs to
       coordinates; that happens when a packet is merged into a ``FixInfo``.

    3. Coordinates stay in NMEA NDEG form (``ddmm.mmmm``).
"""

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag

# Maximum number of satellite PRNs carried by one GSA sentence
GSA_SATELLITES = 12

# Maximum number of satellites described by one GSV sentence
SATELLITES_PER_GSV = 4

# Size of the satellite table kept in a FixInfo snapshot
MAX_SATELLITES = 12

# 1 knot = 1.852 km/h
KNOTS_TO_KILOMETERS_PER_HOUR = 1.852


class PackType(IntFlag):
    """Sentence types, usable both as a dispatch tag and as a cumulative mask."""

    NONE = 0
    GPGGA = 1
    GPGSA = 2
    GPGSV = 4
    GPRMC = 8
    GPVTG = 16


class Presence(IntFlag):
    """Field identities for the per-packet and per-snapshot presence masks."""

    SMASK = 1 << 0
    UTCDATE = 1 << 1
    UTCTIME = 1 << 2
    SIG = 1 << 3
    FIX = 1 << 4
    PDOP = 1 << 5
    HDOP = 1 << 6
    VDOP = 1 << 7
    LAT = 1 << 8
    LON = 1 << 9
    ELV = 1 << 10
    SPEED = 1 << 11
    TRACK = 1 << 12
    MTRACK = 1 << 13
    MAGVAR = 1 << 14
    SATINUSECOUNT = 1 << 15
    SATINUSE = 1 << 16
    SATINVIEW = 1 << 17


class Signal(IntEnum):
    """Signal quality, as reported by the GGA fix quality field.

    BAD, LOW, MID and HIGH are the classic four-level names; the remaining
    members follow the GGA quality indicator values.
    """

    BAD = 0
    LOW = 1
    MID = 2
    HIGH = 3
    RTK = 4
    FLOAT_RTK = 5
    ESTIMATED = 6
    MANUAL = 7
    SIMULATION = 8


class Fix(IntEnum):
    """Fix type, as reported by the GSA fix field."""

    BAD = 1
    FIX_2D = 2
    FIX_3D = 3


@dataclass
class Satellite:
    """One satellite-in-view entry of a GSV sentence.

    Attributes:
        id: Satellite PRN number, 0 when the slot is unused.
        elevation: Elevation in degrees (0-90).
        azimuth: Azimuth in degrees from true north (0-359).
        sig: Signal-to-noise ratio in dB-Hz, 0 when not tracking.
    """

    id: int = 0
    elevation: int = 0
    azimuth: int = 0
    sig: int = 0


@dataclass
class GGAPacket:
    """Decoded GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        hour, minute, second, hsec: UTC time of the fix; ``hsec`` is
            hundredths of a second.
        latitude: Latitude in NDEG (``ddmm.mmmm``), unsigned.
        ns: Latitude hemisphere letter ('N' or 'S'), '' when empty.
        longitude: Longitude in NDEG (``dddmm.mmmm``), unsigned.
        ew: Longitude hemisphere letter ('E' or 'W'), '' when empty.
        sig: GPS quality indicator (0 = invalid, 1 = fix, 2 = DGPS, ...).
        satinuse: Number of satellites in use.
        hdop: Horizontal dilution of precision.
        elevation: Antenna altitude above mean sea level.
        elevation_units: Units of ``elevation`` ('M').
        diff: Geoidal separation.
        diff_units: Units of ``diff`` ('M').
        dgps_age: Age of DGPS data in seconds.
        dgps_sid: DGPS reference station id.
        present: Fields supplied by the sentence.
    """

    hour: int = 0
    minute: int = 0
    second: int = 0
    hsec: int = 0
    latitude: float = 0.0
    ns: str = ""
    longitude: float = 0.0
    ew: str = ""
    sig: int = 0
    satinuse: int = 0
    hdop: float = 0.0
    elevation: float = 0.0
    elevation_units: str = ""
    diff: float = 0.0
    diff_units: str = ""
    dgps_age: float = 0.0
    dgps_sid: int = 0
    present: Presence = Presence(0)


@dataclass
class GSAPacket:
    """Decoded GSA (DOP and Active Satellites) sentence.

    Attributes:
        selection_mode: 'A' (automatic 2D/3D) or 'M' (manual), '' when absent.
        fix: Fix type; ``Fix.BAD`` when absent.
        prns: The 12 PRN slots, sorted ascending with unused (0) slots last.
        pdop: Position dilution of precision, 0.0 when absent.
        hdop: Horizontal dilution of precision, 0.0 when absent.
        vdop: Vertical dilution of precision, 0.0 when absent.
        present: Fields supplied by the sentence.
    """

    selection_mode: str = ""
    fix: int = Fix.BAD
    prns: list[int] = field(default_factory=lambda: [0] * GSA_SATELLITES)
    pdop: float = 0.0
    hdop: float = 0.0
    vdop: float = 0.0
    present: Presence = Presence(0)


@dataclass
class GSVPacket:
    """Decoded GSV (Satellites in View) sentence.

    Attributes:
        pack_count: Total number of GSV sentences in this cycle.
        pack_index: 1-based index of this sentence within the cycle.
        sat_count: Total number of satellites in view.
        satellites: Up to four satellite entries carried by this sentence.
        present: Fields supplied by the sentence.
    """

    pack_count: int = 0
    pack_index: int = 0
    sat_count: int = 0
    satellites: list[Satellite] = field(
        default_factory=lambda: [Satellite() for _ in range(SATELLITES_PER_GSV)]
    )
    present: Presence = Presence(0)


@dataclass
class RMCPacket:
    """Decoded RMC (Recommended Minimum Specific GNSS Data) sentence.

    Attributes:
        year: Years since 1900 (2-digit years below 90 map to 2000-2089).
        month: Zero-based month (0 = January).
        day: Day of month.
        hour, minute, second, hsec: UTC time.
        status: 'A' (active) or 'V' (void).
        latitude, ns, longitude, ew: Position in NDEG with hemisphere letters.
        speed: Ground speed in knots.
        direction: Track angle in degrees true.
        declination: Magnetic variation in degrees.
        declination_ew: Direction of the magnetic variation ('E' or 'W').
        mode: FAA mode indicator (NMEA 2.3+), '' when not sent.
        present: Fields supplied by the sentence.
    """

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    hsec: int = 0
    status: str = ""
    latitude: float = 0.0
    ns: str = ""
    longitude: float = 0.0
    ew: str = ""
    speed: float = 0.0
    direction: float = 0.0
    declination: float = 0.0
    declination_ew: str = ""
    mode: str = ""
    present: Presence = Presence(0)


@dataclass
class VTGPacket:
    """Decoded VTG (Track Made Good and Ground Speed) sentence.

    Attributes:
        direction: Track in degrees true.
        direction_t: Unit letter of ``direction``, always 'T'.
        declination: Track in degrees magnetic.
        declination_m: Unit letter of ``declination``, always 'M'.
        speed_knots: Ground speed in knots.
        speed_knots_n: Unit letter of ``speed_knots``, always 'N'.
        speed_kph: Ground speed in kilometers per hour.
        speed_kph_k: Unit letter of ``speed_kph``, always 'K'.
        present: Fields supplied by the sentence.
    """

    direction: float = 0.0
    direction_t: str = ""
    declination: float = 0.0
    declination_m: str = ""
    speed_knots: float = 0.0
    speed_knots_n: str = ""
    speed_kph: float = 0.0
    speed_kph_k: str = ""
    present: Presence = Presence(0)


Packet = GGAPacket | GSAPacket | GSVPacket | RMCPacket | VTGPacket
