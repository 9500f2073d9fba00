"""# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial"""
from __future__ import annotations

"""Forward-only byte cursor with metadata."""

from typing import Any, Dict, Optional

from .errors import TruncatedInputError


class Buffer:
    """Immutable bytes plus a read offset that only moves forward.

    Reads are all-or-nothing: asking for more bytes than remain raises
    TruncatedInputError instead of returning a short chunk.
    """

    def __init__(self, data: bytes, meta: Optional[Dict[str, Any]] = None):
        self._data = bytes(data)
        self._pos = 0
        self.meta = meta or {}

    def read(self, size: int | None = None) -> bytes:
        """Return exactly `size` bytes (or the remainder if None) and advance the cursor."""
        if size is None:
            size = len(self._data) - self._pos
        if size < 0:
            raise ValueError("read size must be non-negative")
        if size > self.remaining:
            raise TruncatedInputError(size, self.remaining, self._pos)
        chunk = self._data[self._pos : self._pos + size]
        self._pos += size
        return chunk

    def read_byte(self) -> int:
        """Return the next byte as an int."""
        if self._pos >= len(self._data):
            raise TruncatedInputError(1, 0, self._pos)
        value = self._data[self._pos]
        self._pos += 1
        return value

    @property
    def data(self) -> bytes:
        """The full underlying bytes, independent of the cursor."""
        return self._data

    @property
    def offset(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        """Bytes left unread."""
        return len(self._data) - self._pos

    def __len__(self) -> int:
        return len(self._data)
