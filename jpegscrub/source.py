"""# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial"""
from __future__ import annotations

"""Source element that reads a whole image from a path, URI or binary stream."""

import logging
import os
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import BinaryIO

from .buffer import Buffer
from .element import SourceElement
from .type_finder import HeaderAnalyzer, header_sample_to_hex, sniff_caps

logger = logging.getLogger(__name__)


def uri_to_path(uri: str) -> str:
    """Turn a file:// URI into a local path; other strings are taken as paths."""
    if uri.startswith("file://"):
        parsed = urllib.parse.urlparse(uri)
        return urllib.request.url2pathname(parsed.path)
    return uri


@dataclass
class ImageSource(SourceElement):
    """Reads the complete input in one go and pushes it as a single Buffer.

    Exactly one of `uri` or `stream` is used; `stream` wins when both are set.
    Standard input is passed as `stream` (e.g. `sys.stdin.buffer`).

    Buffer meta:
        - uri: Source URI, or "-" for a stream
        - seekable: Whether the input is a regular file that may be rewritten
    """

    uri: str | None = None
    stream: BinaryIO | None = None
    header_analyzer: HeaderAnalyzer | None = None

    def __post_init__(self) -> None:
        super().__init__()
        if self.uri is None and self.stream is None:
            raise ValueError("ImageSource needs a uri or a stream")
        if self.header_analyzer is None:
            self.header_analyzer = HeaderAnalyzer()

    def _read_all(self) -> tuple[bytes, dict[str, object]]:
        if self.stream is not None:
            return self.stream.read(), {"uri": "-", "seekable": False}

        path = uri_to_path(self.uri)
        if not os.path.isfile(path):
            raise FileNotFoundError(f"resource does not exist: {self.uri}")
        with open(path, "rb") as file:
            return file.read(), {"uri": self.uri, "path": path, "seekable": True}

    def process(self) -> None:
        """Read the input, sniff its caps and push it downstream."""
        data, meta = self._read_all()
        caps = sniff_caps(data, self.header_analyzer)
        logger.debug(
            "read %d bytes from %s as %s (%s)",
            len(data), meta["uri"], caps.label(), header_sample_to_hex(data),
        )
        self.push(Buffer(data, meta), caps)
