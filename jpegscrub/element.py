# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Element base classes.

Data travels element to element as Buffer objects pushed through pads; the
type of that data travels ahead of it as a "caps" event. Sources start the
flow from `process`, sinks end it in `on_buffer`.
"""

from __future__ import annotations

from .buffer import Buffer
from .caps import Caps
from .pad import Pad, PadDirection


class CapsNegotiationError(Exception):
    """Raised when an element is offered caps it cannot handle."""


class Element:
    """Processing step with dynamically requested pads."""

    def __init__(self) -> None:
        self._pads: list[Pad] = []

    def request_pad(self, direction: PadDirection, name: str | None = None) -> Pad:
        """Create a pad; unnamed pads are numbered by creation order."""
        pad = Pad(name or f"{direction.value}{len(self._pads)}", direction, self)
        self._pads.append(pad)
        return pad

    @property
    def pads(self) -> list[Pad]:
        return list(self._pads)

    @property
    def src_pads(self) -> list[Pad]:
        return [pad for pad in self._pads if pad.direction == PadDirection.SRC]

    def process(self) -> None:
        """Do the element's own work; non-source elements usually have none."""
        return

    def on_buffer(self, pad: Pad, buffer: Buffer) -> None:  # pragma: no cover - base hook
        raise NotImplementedError

    def handle_event(self, pad: Pad, event: str, payload: object | None = None) -> None:
        """Handle an event arriving on `pad`. The base class understands "caps" only."""
        if event == "caps":
            if not isinstance(payload, Caps):
                raise TypeError("caps event requires Caps payload")
            self.accept_caps(payload)
            pad.caps = payload
            return
        raise NotImplementedError(f"unhandled event: {event}")

    def accept_caps(self, caps: Caps) -> None:
        """Raise CapsNegotiationError if `caps` cannot be handled. Accepts anything by default."""
        return

    def push(self, buffer: Buffer, caps: Caps | None = None) -> None:
        """Send `buffer` out of every linked src pad, announcing `caps` first if given."""
        for pad in self.src_pads:
            if not pad.peer:
                continue
            if caps is not None:
                pad.set_caps(caps, propagate=True)
            pad.push(buffer)


class SourceElement(Element):
    """Element that only produces data."""

    def request_pad(self, direction: PadDirection, name: str | None = None) -> Pad:
        if direction != PadDirection.SRC:
            raise ValueError("SourceElement only provides src pads")
        return super().request_pad(direction, name)


class SinkElement(Element):
    """Element that only consumes data."""

    def request_pad(self, direction: PadDirection, name: str | None = None) -> Pad:
        if direction != PadDirection.SINK:
            raise ValueError("SinkElement only provides sink pads")
        return super().request_pad(direction, name)
