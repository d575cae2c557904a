"""GSA sentence parser.

GSA (GNSS DOP and Active Satellites) reports the fix type, the PRNs of the
satellites used in the solution and the dilution of precision triad.

GSA Sentence Format:
    $GPGSA,A,3,04,05,,,09,12,,,24,,,,2.5,1.3,2.1*39
           | | |                      |   |   |
           | | |                      |   |   +-- VDOP
           | | |                      |   +-- HDOP
           | | |                      +-- PDOP
           | | +-- 12 PRN slots of satellites used in the fix
           | +-- Fix type (1 = no fix, 2 = 2D, 3 = 3D)
           +-- Selection mode (A = automatic, M = manual)

Normalization rules:
    - The selection mode is upper-cased and must be 'A' or 'M'.
    - PRN slots are sorted ascending with unused slots (0) last; when no
      PRN is present the slots are all 0.
    - DOP values are made non-negative; absent values become 0.0.
"""

import logging
import sys

from gpsfix.nmea.scanner import scan
from gpsfix.nmea.types import GSA_SATELLITES, Fix, GSAPacket, Presence

__all__ = ["parse_gsa", "prn_sort_key"]

logger = logging.getLogger(__name__)

_TEMPLATE = "$GPGSA,%c,%d," + "%d," * GSA_SATELLITES + "%f,%f,%f*"
_TOKEN_COUNT = 2 + GSA_SATELLITES + 3

_SELECTION_MODES = ("A", "M")

# Unused PRN slots sort after every real PRN
_UNUSED_PRN_KEY = sys.maxsize


def prn_sort_key(prn: int) -> int:
    """Sort key that orders PRNs ascending and puts unused slots (0) last.

    Example:
        >>> sorted([0, 12, 4, 0, 9], key=prn_sort_key)
        [4, 9, 12, 0, 0]
    """
    return prn if prn else _UNUSED_PRN_KEY


def parse_gsa(sentence: str | bytes, log: logging.Logger | None = None) -> GSAPacket | None:
    """Parse a GSA sentence into a ``GSAPacket``.

    Args:
        sentence: A complete, checksum-verified sentence starting with
            "$GPGSA,".
        log: Logger receiving the trace and error records.

    Returns:
        GSAPacket, or None when the sentence does not carry exactly 17
        fields, or its selection mode or fix type is out of range.

    Example:
        >>> packet = parse_gsa("$GPGSA,A,3,04,05,,,09,12,,,24,,,,2.5,1.3,2.1*39")
        >>> packet.prns
        [4, 5, 9, 12, 24, 0, 0, 0, 0, 0, 0, 0]
    """
    log = log or logger
    log.debug("GPGSA: %r", sentence)

    tokens = scan(sentence, _TEMPLATE)
    if len(tokens) != _TOKEN_COUNT:
        log.warning("GPGSA parse error: need %d tokens, got %d in %r", _TOKEN_COUNT, len(tokens), sentence)
        return None

    mode, fix = tokens[0], tokens[1]
    prns = [prn or 0 for prn in tokens[2 : 2 + GSA_SATELLITES]]
    pdop, hdop, vdop = tokens[2 + GSA_SATELLITES :]

    packet = GSAPacket()

    if mode is not None:
        mode = mode.upper()
        if mode not in _SELECTION_MODES:
            log.warning("GPGSA parse error: invalid selection mode %r in %r", mode, sentence)
            return None
        packet.selection_mode = mode
        packet.present |= Presence.SIG

    if fix is not None:
        if not Fix.BAD <= fix <= Fix.FIX_3D:
            log.warning("GPGSA parse error: invalid fix %d in %r", fix, sentence)
            return None
        packet.fix = fix
        packet.present |= Presence.FIX

    if any(prns):
        packet.prns = sorted(prns, key=prn_sort_key)
        packet.present |= Presence.SATINUSE

    if pdop is not None:
        packet.pdop = abs(pdop)
        packet.present |= Presence.PDOP

    if hdop is not None:
        packet.hdop = abs(hdop)
        packet.present |= Presence.HDOP

    if vdop is not None:
        packet.vdop = abs(vdop)
        packet.present |= Presence.VDOP

    return packet
