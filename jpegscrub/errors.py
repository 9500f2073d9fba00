# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Exception types raised while scrubbing a JPEG stream.

Every scan failure is terminal: once a marker or length field cannot be
trusted, nothing after it can be either, so callers get an exception and no
partial output.
"""

from __future__ import annotations


class ScrubError(Exception):
    """Base class for malformed-input failures.

    Attributes:
        reason: Human-readable description of what went wrong.
        offset: Byte offset in the input where the problem was detected, if known.
    """

    def __init__(self, reason: str, offset: int | None = None):
        self.reason = reason
        self.offset = offset
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.offset is None:
            return self.reason
        return f"{self.reason} at offset 0x{self.offset:x}"


class MarkerSyncError(ScrubError):
    """A marker was expected but the stream held something else."""


class MissingSOIError(MarkerSyncError):
    """The stream does not begin with a start-of-image marker."""

    def __init__(self, code: int, offset: int | None = None):
        self.code = code
        super().__init__(f"expected SOI; saw 0x{code:02x}", offset)


class TruncatedInputError(ScrubError):
    """Input ended while a read was still pending."""

    def __init__(self, needed: int, available: int, offset: int | None = None):
        self.needed = needed
        self.available = available
        super().__init__(
            f"premature end of input: needed {needed} bytes, {available} left", offset
        )


class SegmentLengthError(ScrubError):
    """A segment length field is smaller than the field itself."""

    def __init__(self, length: int, offset: int | None = None):
        self.length = length
        super().__init__(f"early end of stream: segment length {length} < 2", offset)
