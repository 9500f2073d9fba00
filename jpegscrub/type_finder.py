"""# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial"""
from __future__ import annotations

"""Header sniffing for JPEG inputs.

Key pieces:
  - HeaderDetector: small predicate paired with a resulting Caps.
  - HeaderAnalyzer: runs detectors sequentially to find the first match.
  - sniff_caps: detection with a generic binary fallback.

Sniffing only labels the input; whether the stream is actually well formed is
decided by the scanner.
"""

import binascii
from dataclasses import dataclass
from typing import Callable, List, Sequence

from .caps import Caps


@dataclass(frozen=True)
class HeaderDetector:
    """Mapping of a detection function to its resulting Caps."""

    name: str
    detector: Callable[[bytes], bool]
    caps: Caps


def _jpeg_caps(container: str, description: str) -> Caps:
    return Caps(
        media_type="image/jpeg",
        name="image-jpeg",
        params={
            "description": description,
            "extensions": ("jpg", "jpeg", "jfif"),
            "container": container,
            "broader": ("urn:jpegscrub:category:image",),
        },
    )


JFIF_CAPS = _jpeg_caps("jfif", "JPEG image in a JFIF container.")
EXIF_CAPS = _jpeg_caps("exif", "JPEG image with an Exif APP1 header.")
JPEG_CAPS = _jpeg_caps("jpeg", "JPEG image stream.")

BINARY_CAPS = Caps(
    media_type="application/octet-stream",
    name="binary",
    params={
        "description": "Opaque binary data.",
        "broader": ("urn:jpegscrub:category:content",),
    },
)


def _is_jfif(data: bytes) -> bool:
    """SOI followed by an APP0 segment tagged JFIF."""
    return data[:4] == b"\xff\xd8\xff\xe0" and data[6:11] == b"JFIF\x00"


def _is_exif(data: bytes) -> bool:
    """SOI followed by an APP1 segment tagged Exif."""
    return data[:4] == b"\xff\xd8\xff\xe1" and data[6:12] == b"Exif\x00\x00"


def _is_jpeg(data: bytes) -> bool:
    """Detect JPEG signature (FF D8 FF)."""
    return data.startswith(b"\xff\xd8\xff")


DEFAULT_DETECTORS: List[HeaderDetector] = [
    # Specific containers before the bare signature.
    HeaderDetector("jpeg-jfif", _is_jfif, JFIF_CAPS),
    HeaderDetector("jpeg-exif", _is_exif, EXIF_CAPS),
    HeaderDetector("jpeg", _is_jpeg, JPEG_CAPS),
]


def header_sample_to_hex(data: bytes, max_len: int = 16) -> str:
    """Hex-encode the first bytes of a payload for log messages."""
    return binascii.hexlify(data[:max_len], " ").decode("ascii")


class HeaderAnalyzer:
    """Sequentially executes detectors to identify a Caps match."""

    def __init__(self, detectors: Sequence[HeaderDetector] | None = None):
        self.detectors = list(detectors or DEFAULT_DETECTORS)

    def detect(self, data: bytes) -> Caps | None:
        for detector in self.detectors:
            if detector.detector(data):
                return detector.caps
        return None


def sniff_caps(data: bytes, analyzer: HeaderAnalyzer | None = None) -> Caps:
    """Return the caps matching `data`, or BINARY_CAPS if nothing matched."""
    return (analyzer or HeaderAnalyzer()).detect(data) or BINARY_CAPS
