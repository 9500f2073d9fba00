"""# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial"""

from __future__ import annotations

import itertools
from collections.abc import Iterable

from .element import Element
from .pad import PadDirection


class Pipeline:
    """Linear chain of elements.

    `run()` calls `process()` on every element in order; sources push their
    buffers downstream from inside `process`, so by the time the loop ends the
    last element holds the result, which `run()` returns as its `output`.
    """

    def __init__(self, elements: Iterable[Element]):
        self.elements: list[Element] = list(elements)
        link_many(*self.elements)

    def run(self):
        for element in self.elements:
            element.process()
        return getattr(self.elements[-1], "output", None) if self.elements else None


def link_many(*elements: Element) -> None:
    """Link each element's new src pad to the next element's new sink pad."""
    for upstream, downstream in itertools.pairwise(elements):
        upstream.request_pad(PadDirection.SRC).link(downstream.request_pad(PadDirection.SINK))
