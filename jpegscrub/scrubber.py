# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Element that strips metadata segments from JPEG buffers."""

from __future__ import annotations

import logging

from .buffer import Buffer
from .caps import Caps
from .element import CapsNegotiationError, Element
from .pad import Pad
from .scanner import DiagnosticSink, Scanner, summarize_segments

logger = logging.getLogger(__name__)

ACCEPTED_MEDIA_TYPES = ("image/jpeg", "application/octet-stream")


class Scrubber(Element):
    """Runs each incoming buffer through a Scanner and pushes the result.

    Unrecognised binary input is accepted as well as sniffed JPEG, since the
    scanner reports malformed streams with a precise offset. Output caps keep
    the input's type and gain `segments_removed` and `bytes_removed`.
    """

    def __init__(self, diagnostic: DiagnosticSink | None = None):
        super().__init__()
        self.diagnostic = diagnostic

    def accept_caps(self, caps: Caps) -> None:
        if caps.media_type not in ACCEPTED_MEDIA_TYPES:
            raise CapsNegotiationError(f"{self.__class__.__name__} cannot handle caps: {caps}")

    def on_buffer(self, pad: Pad, buffer: Buffer) -> None:
        scanner = Scanner(buffer, diagnostic=self.diagnostic)
        data = scanner.run()
        stats = summarize_segments(scanner.segments)
        logger.info(
            "removed %d of %d segments (%d bytes) from %s",
            stats["segments_removed"], stats["segments_seen"], stats["bytes_removed"],
            buffer.meta.get("uri", "-"),
        )

        out_caps = None
        if pad.caps is not None:
            out_caps = pad.caps.merge_params(
                {"segments_removed": stats["segments_removed"], "bytes_removed": stats["bytes_removed"]}
            )
        meta = {**buffer.meta, **stats, "segments": scanner.segments}
        self.push(Buffer(data, meta), out_caps)
