"""Fix snapshot types aggregated from decoded NMEA sentences."""

from dataclasses import dataclass, field

from gpsfix.nmea.types import MAX_SATELLITES, Fix, PackType, Presence, Signal


@dataclass
class UTCTime:
    """UTC date and time.

    ``year`` counts years since 1900 and ``month`` is zero-based, as decoded
    from RMC. ``hsec`` is hundredths of a second.
    """

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    hsec: int = 0


@dataclass
class TrackedSatellite:
    """One entry of the satellite table, built from GSV and flagged by GSA."""

    id: int = 0
    elevation: int = 0
    azimuth: int = 0
    sig: int = 0
    in_use: bool = False


@dataclass
class SatInfo:
    """Satellites in view and in use.

    Attributes:
        inuse: Number of table entries matched by the last GSA sentence.
        inview: Satellites in view, as reported by the last GSV sentence.
        satellites: Fixed-size table of ``MAX_SATELLITES`` entries, filled
            in GSV order.
    """

    inuse: int = 0
    inview: int = 0
    satellites: list[TrackedSatellite] = field(
        default_factory=lambda: [TrackedSatellite() for _ in range(MAX_SATELLITES)]
    )


@dataclass
class FixInfo:
    """Positioning snapshot accumulated across sentences of one GPS session.

    A ``FixInfo`` is created once per session and updated in place by the
    merge functions of ``gpsfix.fix.aggregator``. It is never reset by a
    merge; start a new session by creating a new instance.

    Attributes:
        utc: Date and time of the latest GGA or RMC sentence.
        sig: Signal quality (see ``Signal``); ``Signal.BAD`` until reported.
        fix: Fix type (see ``Fix``); ``Fix.BAD`` until reported.
        pdop, hdop, vdop: Dilution of precision triad.
        latitude: Signed latitude in NDEG (``ddmm.mmmm``), negative = South.
        longitude: Signed longitude in NDEG (``dddmm.mmmm``), negative = West.
        elevation: Antenna altitude above mean sea level in meters.
        speed: Ground speed in km/h.
        direction: Track angle in degrees true.
        declination: Magnetic track (VTG) in degrees.
        satinfo: Satellite table and counters.
        smask: Sentence types that have contributed so far.
        present: Fields that have been merged so far.
    """

    utc: UTCTime = field(default_factory=UTCTime)
    sig: int = Signal.BAD
    fix: int = Fix.BAD
    pdop: float = 0.0
    hdop: float = 0.0
    vdop: float = 0.0
    latitude: float = 0.0
    longitude: float = 0.0
    elevation: float = 0.0
    speed: float = 0.0
    direction: float = 0.0
    declination: float = 0.0
    satinfo: SatInfo = field(default_factory=SatInfo)
    smask: PackType = PackType.NONE
    present: Presence = Presence(0)
