# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Single-pass segment scanner that drops metadata from a JPEG stream.

The scanner walks the marker structure of the input and copies every segment
to the output except those whose marker code is APP0 or higher (application,
JPEG-extension and comment segments). Once the start-of-scan header has been
copied, the rest of the input is entropy-coded data and is copied verbatim.

Key pieces:
  - Scanner: the cursor/output pair plus the per-segment state machine.
  - Segment: record of one unit seen during the pass, kept or removed.
  - scrub: convenience wrapper running the whole drive loop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .buffer import Buffer
from .errors import MarkerSyncError, MissingSOIError, SegmentLengthError
from .markers import FILL_BYTE, MARKER_PREFIX, Marker, is_removable, marker_name

logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[str], None]


class SegmentOutcome(str, Enum):
    """Result of reading one unit: keep looping or stop the pass."""

    CONTINUE = "continue"
    STOP = "stop"


@dataclass(frozen=True)
class Segment:
    """One structural unit seen during a scan.

    `offset` is the position of the marker code byte in the input. `length` is
    the declared length field, or None for markers that carry no payload.
    `size` is the number of input bytes the unit spans, including any fill or
    padding consumed while synchronizing on its marker.
    """

    code: int
    offset: int
    length: int | None
    size: int
    removed: bool = False

    @property
    def name(self) -> str:
        return marker_name(self.code)


class Scanner:
    """Copies a JPEG stream segment by segment, leaving out removable segments.

    Call `validate_header()` first, then `process_next_segment()` until it
    returns STOP, then `finalize()`. `run()` does all three.
    """

    def __init__(self, data: bytes | Buffer, diagnostic: DiagnosticSink | None = None):
        self._in = data if isinstance(data, Buffer) else Buffer(data)
        self._out = bytearray()
        self._diagnostic = diagnostic or logger.warning
        self._header_seen = False
        self._done = False
        self.segments: list[Segment] = []

    def _read_byte(self) -> int:
        c = self._in.read_byte()
        self._out.append(c)
        return c

    def _read(self, size: int) -> bytes:
        chunk = self._in.read(size)
        self._out += chunk
        return chunk

    def _marker(self) -> int:
        """Synchronize on the next marker and return its code byte."""
        c = self._read_byte()
        while c == FILL_BYTE:
            self._diagnostic(f"skipping zero byte at offset 0x{self._in.offset - 1:x}")
            c = self._read_byte()
        if c != MARKER_PREFIX:
            raise MarkerSyncError(
                f"expecting marker, found 0x{c:02x}", self._in.offset - 1
            )
        while c == MARKER_PREFIX:
            c = self._read_byte()
        return c

    def validate_header(self) -> None:
        """Consume the first marker and require it to be SOI."""
        if self._header_seen:
            raise RuntimeError("header already validated")
        start = self._in.offset
        c = self._marker()
        if c != Marker.SOI:
            raise MissingSOIError(c, self._in.offset - 1)
        self._header_seen = True
        self.segments.append(
            Segment(c, self._in.offset - 1, None, self._in.offset - start)
        )

    def process_next_segment(self) -> SegmentOutcome:
        """Consume exactly one structural unit."""
        if not self._header_seen:
            raise RuntimeError("validate_header() must be called first")
        if self._done:
            raise RuntimeError("scan already finished")

        start = len(self._out)
        in_start = self._in.offset
        c = self._marker()
        code_offset = self._in.offset - 1
        if c == Marker.EOI:
            self.segments.append(Segment(c, code_offset, None, self._in.offset - in_start))
            self._done = True
            return SegmentOutcome.STOP
        if c == FILL_BYTE:
            raise MarkerSyncError("expecting marker; saw 0x00", code_offset)

        length_offset = self._in.offset
        length = int.from_bytes(self._read(2), "big")
        if length < 2:
            raise SegmentLengthError(length, length_offset)
        self._read(length - 2)

        removed = is_removable(c)
        if removed:
            del self._out[start:]
        self.segments.append(
            Segment(c, code_offset, length, self._in.offset - in_start, removed)
        )

        if c == Marker.SOS:
            # Entropy-coded data follows; nothing past here is parsed.
            self._out += self._in.read()
            self._done = True
            return SegmentOutcome.STOP
        return SegmentOutcome.CONTINUE

    def finalize(self) -> bytes:
        """Return the scrubbed stream. Only valid once the pass has stopped."""
        if not self._done:
            raise RuntimeError("scan has not finished")
        return bytes(self._out)

    def run(self) -> bytes:
        self.validate_header()
        while self.process_next_segment() is SegmentOutcome.CONTINUE:
            pass
        return self.finalize()


def scrub(data: bytes | Buffer, diagnostic: DiagnosticSink | None = None) -> bytes:
    """Return `data` with all APPn, JPGn and COM segments removed.

    Raises:
        ScrubError: If the stream is malformed or truncated.
    """
    return Scanner(data, diagnostic=diagnostic).run()


def summarize_segments(segments: list[Segment]) -> dict[str, int]:
    """Count what a scan removed."""
    removed = [segment for segment in segments if segment.removed]
    return {
        "segments_seen": len(segments),
        "segments_removed": len(removed),
        "bytes_removed": sum(segment.size for segment in removed),
    }
