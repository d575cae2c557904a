"""Merging of decoded sentence packets into a ``FixInfo`` snapshot.

Each sentence type contributes a different slice of the snapshot:

    GGA  time of day, signal quality, HDOP, altitude, position
    GSA  fix type, DOP triad, in-use flags of the satellite table
    GSV  satellite table (one slice of four entries per sentence)
    RMC  date and time, position, speed, track; status adjusts sig/fix
    VTG  track, magnetic track, speed

Merges only ever update the snapshot; nothing is cleared between sentences.
Two rules depend on the order in which sentences arrive:

    - GSA marks satellites in use by matching its PRNs against the table
      built by GSV, so it needs a GSV cycle to have been merged first.
    - RMC with status 'V' forces sig and fix back to BAD, whatever earlier
      sentences reported.

Both are idempotent under repeated identical input.
"""

import logging
from collections.abc import Callable

from gpsfix.fix.types import FixInfo, UTCTime
from gpsfix.nmea.fields import apply_hemisphere
from gpsfix.nmea.gsa import prn_sort_key
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
    Signal,
    VTGPacket,
)

__all__ = [
    "info_to_gsa",
    "merge_gga",
    "merge_gsa",
    "merge_gsv",
    "merge_packet",
    "merge_rmc",
    "merge_vtg",
]

logger = logging.getLogger(__name__)

_GGA_FIELDS = Presence.UTCTIME | Presence.SIG | Presence.HDOP | Presence.ELV | Presence.LAT | Presence.LON
_GSA_FIELDS = Presence.FIX | Presence.PDOP | Presence.HDOP | Presence.VDOP
_RMC_FIELDS = (
    Presence.UTCDATE | Presence.UTCTIME | Presence.LAT | Presence.LON | Presence.SPEED | Presence.TRACK
)
_VTG_FIELDS = Presence.TRACK | Presence.MTRACK | Presence.SPEED


def _mark(info: FixInfo, pack: PackType, present: Presence) -> None:
    info.smask |= pack
    info.present |= Presence.SMASK | present


def merge_gga(packet: GGAPacket, info: FixInfo) -> None:
    """Merge a GGA packet: time of day, sig, HDOP, altitude and signed position."""
    info.utc.hour = packet.hour
    info.utc.minute = packet.minute
    info.utc.second = packet.second
    info.utc.hsec = packet.hsec
    info.sig = packet.sig
    info.hdop = packet.hdop
    info.elevation = packet.elevation
    info.latitude = apply_hemisphere(packet.latitude, packet.ns)
    info.longitude = apply_hemisphere(packet.longitude, packet.ew)
    _mark(info, PackType.GPGGA, packet.present & _GGA_FIELDS)


def merge_gsa(packet: GSAPacket, info: FixInfo) -> None:
    """Merge a GSA packet: fix type, DOP triad, and in-use satellites.

    Every non-zero PRN of the packet is looked up among the satellites in
    view. Matching table entries are flagged ``in_use`` and ``inuse`` becomes
    the number of matches, so a PRN that GSV never reported counts for
    nothing. Flags left over from an earlier GSA sentence are cleared first.
    """
    info.fix = packet.fix
    info.pdop = packet.pdop
    info.hdop = packet.hdop
    info.vdop = packet.vdop

    satinfo = info.satinfo
    in_view = satinfo.satellites[: max(0, min(satinfo.inview, MAX_SATELLITES))]
    for satellite in satinfo.satellites:
        satellite.in_use = False

    inuse = 0
    for prn in packet.prns:
        if not prn:
            continue
        for satellite in in_view:
            if satellite.id == prn:
                satellite.in_use = True
                inuse += 1
    satinfo.inuse = inuse

    present = packet.present & _GSA_FIELDS
    if Presence.SATINUSE in packet.present:
        present |= Presence.SATINUSE | Presence.SATINUSECOUNT
    _mark(info, PackType.GPGSA, present)


def merge_gsv(packet: GSVPacket, info: FixInfo) -> None:
    """Merge one GSV sentence into its slice of the satellite table.

    Sentence ``n`` of a cycle fills table entries ``4*(n-1)`` onwards. A
    sentence whose index exceeds its own pack count, or whose slice would
    not fit in the table, is ignored so that it cannot corrupt the entries
    merged from the rest of the cycle. The last sentence of a cycle also
    clears any table entries beyond the satellite count.
    """
    if packet.pack_index > packet.pack_count or packet.pack_index * SATELLITES_PER_GSV > MAX_SATELLITES:
        logger.debug(
            "Ignoring GPGSV %d of %d: outside the satellite table", packet.pack_index, packet.pack_count
        )
        return

    pack_index = max(packet.pack_index, 1)
    satinfo = info.satinfo
    satinfo.inview = packet.sat_count

    offset = (pack_index - 1) * SATELLITES_PER_GSV
    count = min(packet.sat_count - offset, SATELLITES_PER_GSV)

    for index, satellite in enumerate(packet.satellites[: max(count, 0)]):
        entry = satinfo.satellites[offset + index]
        entry.id = satellite.id
        entry.elevation = satellite.elevation
        entry.azimuth = satellite.azimuth
        entry.sig = satellite.sig

    if pack_index == packet.pack_count:
        for entry in satinfo.satellites[max(packet.sat_count, 0) :]:
            entry.id = entry.elevation = entry.azimuth = entry.sig = 0
            entry.in_use = False

    _mark(info, PackType.GPGSV, packet.present & Presence.SATINVIEW)


def merge_rmc(packet: RMCPacket, info: FixInfo) -> None:
    """Merge an RMC packet.

    Status 'A' lifts an undetermined sig/fix to ``Signal.MID`` /
    ``Fix.FIX_2D`` without downgrading anything better. Status 'V' forces
    both to BAD. Time, position, track and speed (knots converted to km/h)
    are always overwritten.
    """
    present = packet.present & _RMC_FIELDS

    if packet.status == "A":
        if info.sig == Signal.BAD:
            info.sig = Signal.MID
        if info.fix == Fix.BAD:
            info.fix = Fix.FIX_2D
        present |= Presence.SIG | Presence.FIX
    elif packet.status == "V":
        info.sig = Signal.BAD
        info.fix = Fix.BAD
        present |= Presence.SIG | Presence.FIX

    info.utc = UTCTime(
        year=packet.year,
        month=packet.month,
        day=packet.day,
        hour=packet.hour,
        minute=packet.minute,
        second=packet.second,
        hsec=packet.hsec,
    )
    info.latitude = apply_hemisphere(packet.latitude, packet.ns)
    info.longitude = apply_hemisphere(packet.longitude, packet.ew)
    info.speed = packet.speed * KNOTS_TO_KILOMETERS_PER_HOUR
    info.direction = packet.direction
    _mark(info, PackType.GPRMC, present)


def merge_vtg(packet: VTGPacket, info: FixInfo) -> None:
    """Merge a VTG packet: track, magnetic track and speed in km/h."""
    info.direction = packet.direction
    info.declination = packet.declination
    info.speed = packet.speed_kph
    _mark(info, PackType.GPVTG, packet.present & _VTG_FIELDS)


_MERGERS: dict[type, Callable[..., None]] = {
    GGAPacket: merge_gga,
    GSAPacket: merge_gsa,
    GSVPacket: merge_gsv,
    RMCPacket: merge_rmc,
    VTGPacket: merge_vtg,
}


def merge_packet(packet: Packet, info: FixInfo) -> None:
    """Merge any decoded packet into ``info``.

    Raises:
        TypeError: If ``packet`` is not one of the five packet types.
    """
    merger = _MERGERS.get(type(packet))
    if merger is None:
        raise TypeError(f"Cannot merge {type(packet).__name__} into FixInfo")
    merger(packet, info)


def info_to_gsa(info: FixInfo) -> GSAPacket:
    """Build a GSA packet describing the fix and in-use satellites of ``info``.

    Only fields marked present in the snapshot are carried over. The
    selection mode is 'M' for ``Signal.MANUAL`` and 'A' otherwise.
    """
    packet = GSAPacket()

    if Presence.SIG in info.present:
        packet.selection_mode = "M" if info.sig == Signal.MANUAL else "A"
        packet.present |= Presence.SIG

    if Presence.FIX in info.present:
        packet.fix = info.fix
        packet.present |= Presence.FIX

    if Presence.SATINUSE in info.present:
        prns = [sat.id for sat in info.satinfo.satellites if sat.in_use and sat.id][:GSA_SATELLITES]
        if prns:
            prns += [0] * (GSA_SATELLITES - len(prns))
            packet.prns = sorted(prns, key=prn_sort_key)
            packet.present |= Presence.SATINUSE

    for flag, name in ((Presence.PDOP, "pdop"), (Presence.HDOP, "hdop"), (Presence.VDOP, "vdop")):
        if flag in info.present:
            setattr(packet, name, getattr(info, name))
            packet.present |= flag

    return packet
