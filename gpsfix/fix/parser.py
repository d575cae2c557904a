"""NMEAParser: parsing context that turns raw receiver bytes into a fix.

A parser owns one ``FixInfo`` snapshot for the lifetime of a GPS session
and the logger that receives trace and error records for every sentence it
handles. Reading from the serial port (or file, or socket) and collecting
complete lines is left to the caller; ``parse`` only needs a buffer that
holds zero or more complete frames.

Usage::

    parser = NMEAParser(logger=logging.getLogger("gps.rover"))
    for chunk in transport:
        parser.parse(chunk)
        print(parser.info.latitude, parser.info.longitude)

Independent sessions can run in separate threads as long as each thread
uses its own parser.
"""

import logging

from gpsfix.fix.aggregator import merge_packet
from gpsfix.fix.types import FixInfo
from gpsfix.nmea.checksum import find_tail
from gpsfix.nmea.decode import decode_sentence

__all__ = ["NMEAParser"]

_SENTENCE_START = ord("$")


class NMEAParser:
    """Decode NMEA frames from byte buffers and merge them into a snapshot.

    Args:
        info: Snapshot to update. A new ``FixInfo`` is created when omitted.
        logger: Logger used for all trace and error records of this parser.
            Defaults to this module's logger, which is silent unless the
            application configures logging.
    """

    def __init__(
        self,
        info: FixInfo | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.info = info if info is not None else FixInfo()
        self._logger = logger or logging.getLogger(__name__)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @logger.setter
    def logger(self, value: logging.Logger | None) -> None:
        """Replace the logger; ``None`` restores the default one."""
        self._logger = value or logging.getLogger(__name__)

    def reset(self) -> None:
        """Start a new session with an empty snapshot."""
        self.info = FixInfo()

    def _handle_frame(self, frame: bytes) -> bool:
        """Decode one verified frame and merge it; True when merged."""
        sentence = frame.decode("latin-1")
        packet = decode_sentence(sentence, self._logger)
        if packet is None:
            return False
        merge_packet(packet, self.info)
        return True

    def parse(self, buffer: bytes | bytearray | str) -> int:
        """Decode every complete, valid frame in ``buffer``.

        Bytes before the first '$' and between frames are skipped. A frame
        that fails its checksum, lacks the CR LF tail, or is cut short by a
        new '$' is dropped as a whole and scanning resumes at the next '$'.

        Args:
            buffer: Raw receiver output. A ``str`` is encoded as Latin-1, with
                characters outside it replaced by "?".

        Returns:
            Number of packets merged into ``self.info``.
        """
        if isinstance(buffer, str):
            buffer = buffer.encode("latin-1", errors="replace")
        data = bytes(buffer)

        merged = 0
        position = data.find(_SENTENCE_START)
        while position != -1:
            consumed, _ = find_tail(data[position:])
            if consumed:
                if self._handle_frame(data[position : position + consumed]):
                    merged += 1
                position = data.find(_SENTENCE_START, position + consumed)
            else:
                self._logger.debug("No valid frame at offset %d", position)
                position = data.find(_SENTENCE_START, position + 1)

        return merged
