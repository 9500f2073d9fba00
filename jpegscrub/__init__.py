# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial

"""Strip application, extension and comment segments from JPEG streams."""

from .buffer import Buffer
from .caps import Caps, summarize_caps
from .element import CapsNegotiationError
from .errors import (
    MarkerSyncError,
    MissingSOIError,
    ScrubError,
    SegmentLengthError,
    TruncatedInputError,
)
from .markers import Marker, is_removable, marker_name
from .pad import Pad, PadDirection
from .pipeline import Pipeline, link_many
from .scanner import Scanner, Segment, SegmentOutcome, scrub, summarize_segments
from .scrubber import Scrubber
from .sink import ByteSink
from .source import ImageSource

__all__ = [
    "Buffer",
    "ByteSink",
    "Caps",
    "CapsNegotiationError",
    "ImageSource",
    "Marker",
    "MarkerSyncError",
    "MissingSOIError",
    "Pad",
    "PadDirection",
    "Pipeline",
    "Scanner",
    "ScrubError",
    "Scrubber",
    "Segment",
    "SegmentLengthError",
    "SegmentOutcome",
    "TruncatedInputError",
    "is_removable",
    "link_many",
    "marker_name",
    "scrub",
    "summarize_caps",
    "summarize_segments",
]
