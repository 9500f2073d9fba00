# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""JPEG marker codes.

Every marker is written as 0xFF followed by one of these code bytes.
"""

from __future__ import annotations

from enum import IntEnum

MARKER_PREFIX = 0xFF
FILL_BYTE = 0x00


class Marker(IntEnum):
    SOF0 = 0xC0  # Start of frame, baseline
    SOF2 = 0xC2  # Start of frame, progressive Huffman
    DHT = 0xC4  # Define Huffman tables
    JPG = 0xC8  # Reserved for JPEG extensions
    DAC = 0xCC  # Arithmetic coding conditioning
    RST0 = 0xD0  # Restart interval termination
    RST7 = 0xD7
    SOI = 0xD8  # Start of image
    EOI = 0xD9  # End of image
    SOS = 0xDA  # Start of scan
    DQT = 0xDB  # Define quantization tables
    DNL = 0xDC  # Define number of lines
    DRI = 0xDD  # Define restart interval
    DHP = 0xDE  # Define hierarchical progression
    EXP = 0xDF  # Expand reference components
    APP0 = 0xE0  # Application segments, APP0..APP15
    JPG0 = 0xF0  # JPEG extensions, JPG0..JPG13
    COM = 0xFE  # Comment


# Everything from APP0 upward is metadata: APPn, JPGn, COM, and the
# unassigned codes in between.
REMOVABLE_THRESHOLD = Marker.APP0


def is_removable(code: int) -> bool:
    """Return True if a segment with this marker code is dropped from the output."""
    return code >= REMOVABLE_THRESHOLD


def marker_name(code: int) -> str:
    """Short mnemonic for a marker code, e.g. "APP1", "RST3" or "0xc1"."""
    if Marker.RST0 <= code <= Marker.RST7:
        return f"RST{code - Marker.RST0}"
    if Marker.APP0 <= code < Marker.JPG0:
        return f"APP{code - Marker.APP0}"
    if Marker.JPG0 <= code < Marker.COM:
        return f"JPG{code - Marker.JPG0}"
    try:
        return Marker(code).name
    except ValueError:
        return f"0x{code:02x}"
