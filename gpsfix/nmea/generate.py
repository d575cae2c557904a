"""NMEA sentence generation.

Packets are rendered back into framed sentences, including the checksum and
the CR LF tail, so they can be fed to a receiver simulator or decoded again.
A field whose ``Presence`` bit is clear is written as an empty field, which
keeps the presence mask stable across a decode -> generate -> decode cycle.
"""

from collections.abc import Callable

from gpsfix.nmea.checksum import calculate_checksum
from gpsfix.nmea.types import (
    GSA_SATELLITES,
    SATELLITES_PER_GSV,
    GGAPacket,
    GSAPacket,
    GSVPacket,
    Packet,
    Presence,
    RMCPacket,
    VTGPacket,
)

__all__ = [
    "format_sentence",
    "generate_gga",
    "generate_gsa",
    "generate_gsv",
    "generate_rmc",
    "generate_sentence",
    "generate_vtg",
]


def format_sentence(body: str) -> str:
    """Frame a sentence body with '$', its checksum and CR LF.

    Example:
        >>> format_sentence("GPVTG,,T,,M,,N,,K")
        '$GPVTG,,T,,M,,N,,K*4E\\r\\n'
    """
    return f"${body}*{calculate_checksum(body):02X}\r\n"


def _decimal(value: float) -> str:
    # shortest text that reads back as exactly the same float
    return repr(float(value))


def _time(hour: int, minute: int, second: int, hsec: int) -> str:
    return f"{hour:02d}{minute:02d}{second:02d}.{hsec:02d}"


def _when(present: Presence, flag: Presence, text: str) -> str:
    return text if flag in present else ""


def generate_gga(packet: GGAPacket) -> str:
    p = packet.present
    fields = [
        "GPGGA",
        _when(p, Presence.UTCTIME, _time(packet.hour, packet.minute, packet.second, packet.hsec)),
        _when(p, Presence.LAT, f"{packet.latitude:09.4f}"),
        _when(p, Presence.LAT, packet.ns),
        _when(p, Presence.LON, f"{packet.longitude:010.4f}"),
        _when(p, Presence.LON, packet.ew),
        _when(p, Presence.SIG, f"{packet.sig:d}"),
        _when(p, Presence.SATINUSECOUNT, f"{packet.satinuse:02d}"),
        _when(p, Presence.HDOP, _decimal(packet.hdop)),
        _when(p, Presence.ELV, _decimal(packet.elevation)),
        packet.elevation_units,
        _decimal(packet.diff) if packet.diff_units else "",
        packet.diff_units,
        _decimal(packet.dgps_age) if packet.dgps_age else "",
        f"{packet.dgps_sid:04d}" if packet.dgps_sid else "",
    ]
    return format_sentence(",".join(fields))


def generate_gsa(packet: GSAPacket) -> str:
    p = packet.present
    prns = [f"{prn:02d}" if prn else "" for prn in packet.prns[:GSA_SATELLITES]]
    fields = [
        "GPGSA",
        _when(p, Presence.SIG, packet.selection_mode),
        _when(p, Presence.FIX, f"{packet.fix:d}"),
        *(prns + [""] * (GSA_SATELLITES - len(prns))),
        _when(p, Presence.PDOP, _decimal(packet.pdop)),
        _when(p, Presence.HDOP, _decimal(packet.hdop)),
        _when(p, Presence.VDOP, _decimal(packet.vdop)),
    ]
    return format_sentence(",".join(fields))


def generate_gsv(packet: GSVPacket) -> str:
    """Render one GSV sentence.

    Only as many satellites as remain for this sentence's position in the
    cycle are written, so the last sentence of a cycle may be short.
    """
    remaining = packet.sat_count - (packet.pack_index - 1) * SATELLITES_PER_GSV
    count = max(0, min(remaining, SATELLITES_PER_GSV))

    fields = [
        "GPGSV",
        f"{packet.pack_count:d}",
        f"{packet.pack_index:d}",
        _when(packet.present, Presence.SATINVIEW, f"{packet.sat_count:02d}"),
    ]
    for satellite in packet.satellites[:count]:
        fields += [
            f"{satellite.id:02d}",
            f"{satellite.elevation:02d}",
            f"{satellite.azimuth:03d}",
            f"{satellite.sig:02d}" if satellite.sig else "",
        ]
    return format_sentence(",".join(fields))


def generate_rmc(packet: RMCPacket) -> str:
    p = packet.present
    fields = [
        "GPRMC",
        _time(packet.hour, packet.minute, packet.second, packet.hsec),
        packet.status,
        _when(p, Presence.LAT, f"{packet.latitude:09.4f}"),
        _when(p, Presence.LAT, packet.ns),
        _when(p, Presence.LON, f"{packet.longitude:010.4f}"),
        _when(p, Presence.LON, packet.ew),
        _when(p, Presence.SPEED, _decimal(packet.speed)),
        _when(p, Presence.TRACK, _decimal(packet.direction)),
        f"{packet.day:02d}{packet.month + 1:02d}{packet.year % 100:02d}",
        _when(p, Presence.MAGVAR, _decimal(packet.declination)),
        _when(p, Presence.MAGVAR, packet.declination_ew),
    ]
    if packet.mode:
        fields.append(packet.mode)
    return format_sentence(",".join(fields))


def generate_vtg(packet: VTGPacket) -> str:
    p = packet.present
    fields = [
        "GPVTG",
        _when(p, Presence.TRACK, _decimal(packet.direction)),
        "T",
        _when(p, Presence.MTRACK, _decimal(packet.declination)),
        "M",
        _when(p, Presence.SPEED, _decimal(packet.speed_knots)),
        "N",
        _when(p, Presence.SPEED, _decimal(packet.speed_kph)),
        "K",
    ]
    return format_sentence(",".join(fields))


_GENERATORS: dict[type, Callable[..., str]] = {
    GGAPacket: generate_gga,
    GSAPacket: generate_gsa,
    GSVPacket: generate_gsv,
    RMCPacket: generate_rmc,
    VTGPacket: generate_vtg,
}


def generate_sentence(packet: Packet) -> str:
    """Render any decoded packet as a framed sentence.

    Raises:
        TypeError: If ``packet`` is not one of the five packet types.
    """
    generator = _GENERATORS.get(type(packet))
    if generator is None:
        raise TypeError(f"Cannot generate a sentence from {type(packet).__name__}")
    return generator(packet)
