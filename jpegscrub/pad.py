# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Pads: the endpoints through which elements exchange buffers and events."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .buffer import Buffer
    from .caps import Caps
    from .element import Element


class PadDirection(str, Enum):
    """SRC pads send downstream, SINK pads receive from upstream."""

    SRC = "src"
    SINK = "sink"


class Pad:
    """Endpoint owned by an Element, linked to at most one peer of the opposite direction."""

    def __init__(self, name: str, direction: PadDirection, element: Element):
        self.name = name
        self.direction = direction
        self.element = element
        self.peer: Pad | None = None
        self.caps: Caps | None = None

    def link(self, peer: Pad) -> None:
        if self.peer or peer.peer:
            raise ValueError("pad already linked")
        if self.direction == peer.direction:
            raise ValueError("pad directions must be opposite")
        self.peer = peer
        peer.peer = self

    def _downstream(self, what: str) -> Pad:
        if self.direction != PadDirection.SRC:
            raise ValueError(f"{what} is only valid on src pads")
        if not self.peer:
            raise ValueError("pad is not linked")
        return self.peer

    def set_caps(self, caps: Caps, propagate: bool = False) -> None:
        """Store caps on this pad and optionally announce them downstream."""
        self.caps = caps
        if propagate and self.direction == PadDirection.SRC:
            peer = self._downstream("set_caps")
            peer.element.handle_event(peer, "caps", caps)

    def push(self, buffer: Buffer) -> None:
        """Hand a buffer to the linked sink pad's element."""
        peer = self._downstream("push")
        peer.element.on_buffer(peer, buffer)
