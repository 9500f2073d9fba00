"""# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial"""
from __future__ import annotations

"""Sink elements for the pipeline."""

from .buffer import Buffer
from .caps import Caps
from .element import SinkElement
from .pad import Pad


class ByteSink(SinkElement):
    """Terminal sink that keeps the last buffer it received.

    Nothing is written anywhere; the caller decides what to do with `output`
    once the pipeline has finished, so a failure upstream never leaves a
    half-written destination.
    """

    def __init__(self) -> None:
        super().__init__()
        self.buffer: Buffer | None = None
        self.caps: Caps | None = None

    @property
    def output(self) -> bytes | None:
        if self.buffer is None:
            return None
        return self.buffer.data

    def on_buffer(self, pad: Pad, buffer: Buffer) -> None:
        if not isinstance(buffer, Buffer):
            raise TypeError("ByteSink expects Buffer payloads")
        self.buffer = buffer
        self.caps = pad.caps
