"""Offset locator: map parser (line, column) positions to byte spans.

Parsers report 1-based line and column numbers counted in characters, while
the graph output needs UTF-8 byte offsets into the original file text.
"""

from __future__ import annotations

import re
from bisect import bisect_right

from cssgraph.model.span import Span

__all__ = ["CSS_LINE_BREAKS", "LF_LINE_BREAKS", "TextIndex", "locate"]

# html.parser counts only "\n" when reporting positions.
LF_LINE_BREAKS = re.compile(r"\n")

# tinycss2 folds "\r\n", "\r" and "\f" into a single newline before it
# tokenizes, so its line numbers have to be mapped back the same way.
CSS_LINE_BREAKS = re.compile(r"\r\n|[\r\n\f]")


class TextIndex:
    """Line and byte index over one file's text.

    Built once per file; every position lookup afterwards is a couple of
    list lookups instead of a rescan of the text.
    """

    def __init__(self, text: str, line_breaks: re.Pattern[str] = LF_LINE_BREAKS):
        self.text = text
        self._line_starts = [0]
        # Index of the last character that still belongs to each line,
        # including the line break itself.
        self._line_lasts: list[int] = []
        for match in line_breaks.finditer(text):
            self._line_lasts.append(match.start())
            self._line_starts.append(match.end())
        self._line_lasts.append(len(text) - 1)
        self._ascii = text.isascii()
        self._char_starts: list[int] = []
        self._byte_starts: list[int] = []
        if not self._ascii:
            self._index_multibyte()

    def _index_multibyte(self) -> None:
        # Record only the characters wider than one byte; everything in
        # between advances one byte per character.
        extra = 0
        for i, ch in enumerate(self.text):
            if ord(ch) > 0x7F:
                self._char_starts.append(i)
                self._byte_starts.append(i + extra)
                extra += len(ch.encode("utf-8")) - 1

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def char_offset(self, line: int, column: int) -> int | None:
        """Return the character index at a 1-based position, or None if unreachable."""
        if line < 1 or column < 1 or line > len(self._line_starts):
            return None
        offset = self._line_starts[line - 1] + column - 1
        if offset > self._line_lasts[line - 1]:
            return None
        return offset

    def byte_offset(self, char_offset: int) -> int:
        """Convert a character index into a UTF-8 byte offset."""
        if self._ascii:
            return char_offset
        i = bisect_right(self._char_starts, char_offset - 1)
        if i == 0:
            return char_offset
        # Bytes contributed by the multibyte characters before char_offset.
        last = self._char_starts[i - 1]
        last_byte = self._byte_starts[i - 1]
        width = len(self.text[last].encode("utf-8"))
        return last_byte + width + (char_offset - last - 1)

    def locate(self, line: int, column: int, token: str) -> Span | None:
        """Return the byte span of *token* starting at (line, column)."""
        offset = self.char_offset(line, column)
        if offset is None:
            return None
        start = self.byte_offset(offset)
        return Span(start, start + len(token.encode("utf-8")))


def locate(
    text: str,
    line: int,
    column: int,
    token: str,
    line_breaks: re.Pattern[str] = LF_LINE_BREAKS,
) -> Span | None:
    """Find the byte span of *token* at a 1-based (line, column) in *text*.

    Returns None when the position is never reached, for example when the
    parser reported a position past the end of the file.
    """
    return TextIndex(text, line_breaks).locate(line, column, token)
