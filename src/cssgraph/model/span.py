"""Byte span of a token in a source file."""

from __future__ import annotations

from typing import NamedTuple


class Span(NamedTuple):
    """Half-open byte range ``[start, end)`` in a file's UTF-8 encoding."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start
