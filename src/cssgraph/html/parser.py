"""Tolerant HTML tree builder on top of the standard library tokenizer.

``html.parser`` only tokenizes; this module assembles its events into an
arena Document and recovers the byte offset of every attribute value from
the raw start tag text, which the tokenizer does not report.
"""

from __future__ import annotations

import re
from html.parser import HTMLParser

from cssgraph.html.document import Attribute, Document, NodeType
from cssgraph.offsets import TextIndex

__all__ = ["VOID_ELEMENTS", "parse_document"]

VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "param", "source", "track", "wbr",
    }
)

_P_CLOSERS = frozenset(
    {
        "address", "article", "aside", "blockquote", "details", "div", "dl",
        "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2", "h3",
        "h4", "h5", "h6", "header", "hr", "main", "menu", "nav", "ol", "p",
        "pre", "section", "table", "ul",
    }
)

# Start tag -> (open tags it implicitly closes, tags that stop the search).
_IMPLIED_END: dict[str, tuple[frozenset[str], frozenset[str]]] = {
    "li": (frozenset({"li"}), frozenset({"ul", "ol", "menu"})),
    "dt": (frozenset({"dt", "dd"}), frozenset({"dl"})),
    "dd": (frozenset({"dt", "dd"}), frozenset({"dl"})),
    "tr": (frozenset({"tr", "td", "th"}), frozenset({"table", "thead", "tbody", "tfoot"})),
    "td": (frozenset({"td", "th"}), frozenset({"tr", "table"})),
    "th": (frozenset({"td", "th"}), frozenset({"tr", "table"})),
    "thead": (frozenset({"thead", "tbody", "tfoot", "tr", "td", "th"}), frozenset({"table"})),
    "tbody": (frozenset({"thead", "tbody", "tfoot", "tr", "td", "th"}), frozenset({"table"})),
    "tfoot": (frozenset({"thead", "tbody", "tfoot", "tr", "td", "th"}), frozenset({"table"})),
    "option": (frozenset({"option"}), frozenset({"select", "datalist", "optgroup"})),
}
_P_SCOPE = frozenset({"button", "table", "td", "th", "caption", "template"})

# Attribute inside raw start tag text: name, then an optional value.
_ATTR_RE = re.compile(
    r"""
    (?P<name>[^\s/>][^\s/=>]*)            # attribute name
    (?:\s*=\s*
        (?P<value>"[^"]*"|'[^']*'|[^\s>]*)  # quoted or bare value
    )?
    """,
    re.VERBOSE,
)
_TAG_NAME_RE = re.compile(r"<[^\s/>]*")


def _value_offsets(raw: str) -> list[tuple[str, int | None, str | None]]:
    """Return ``(lowercased name, value char offset, raw value)`` per attribute in *raw*."""
    found: list[tuple[str, int | None, str | None]] = []
    tag = _TAG_NAME_RE.match(raw)
    pos = tag.end() if tag else 0
    for match in _ATTR_RE.finditer(raw, pos):
        value = match.group("value")
        if value is None:
            found.append((match.group("name").lower(), None, None))
            continue
        start = match.start("value")
        if value[:1] in ("'", '"'):
            start += 1
            value = value[1:-1]
        found.append((match.group("name").lower(), start, value))
    return found


class _TreeBuilder(HTMLParser):
    def __init__(self, text: str) -> None:
        super().__init__(convert_charrefs=True)
        self.index = TextIndex(text)
        self.document = Document()
        self._open: list[int] = []

    # --- helpers ----------------------------------------------------------

    @property
    def _current(self) -> int:
        return self._open[-1] if self._open else self.document.root.index

    def _tag_of(self, handle: int) -> str:
        return self.document[handle].tag

    def _pop_through(self, depth: int) -> None:
        del self._open[depth:]

    def _close_implied(self, tag: str) -> None:
        if tag in _IMPLIED_END:
            closes, boundary = _IMPLIED_END[tag]
        elif tag in _P_CLOSERS:
            closes, boundary = frozenset({"p"}), _P_SCOPE
        else:
            return
        for depth in range(len(self._open) - 1, -1, -1):
            open_tag = self._tag_of(self._open[depth])
            if open_tag in closes:
                self._pop_through(depth)
                return
            if open_tag in boundary:
                return

    def _attributes(self, attrs: list[tuple[str, str | None]]) -> tuple[Attribute, ...]:
        raw = self.get_starttag_text() or ""
        line, column = self.getpos()
        tag_start = self.index.char_offset(line, column + 1)
        offsets = _value_offsets(raw)

        result: list[Attribute] = []
        cursor = 0
        for key, value in attrs:
            value_start: int | None = None
            raw_value: str | None = None
            # Attributes come back in source order; pair each with the next
            # raw occurrence of the same name.
            for i in range(cursor, len(offsets)):
                name, rel, raw_text = offsets[i]
                if name == key:
                    cursor = i + 1
                    if rel is not None and tag_start is not None:
                        value_start = self.index.byte_offset(tag_start + rel)
                        raw_value = raw_text
                    break
            result.append(
                Attribute(
                    key=key, value=value or "", value_start=value_start, raw_value=raw_value
                )
            )
        return tuple(result)

    def _element(self, tag: str, attrs: list[tuple[str, str | None]]) -> int:
        self._close_implied(tag)
        return self.document.append_child(
            self._current, NodeType.ELEMENT, tag=tag, attrs=self._attributes(attrs)
        )

    # --- HTMLParser callbacks ---------------------------------------------

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        handle = self._element(tag, attrs)
        if tag not in VOID_ELEMENTS:
            self._open.append(handle)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._element(tag, attrs)

    def handle_endtag(self, tag: str) -> None:
        for depth in range(len(self._open) - 1, -1, -1):
            if self._tag_of(self._open[depth]) == tag:
                self._pop_through(depth)
                return
        # Stray end tag: nothing open to close.

    def handle_data(self, data: str) -> None:
        self.document.append_child(self._current, NodeType.TEXT)

    def handle_comment(self, data: str) -> None:
        self.document.append_child(self._current, NodeType.COMMENT)

    def handle_decl(self, decl: str) -> None:
        self.document.append_child(self._current, NodeType.DOCTYPE)


def parse_document(text: str) -> Document:
    """Parse HTML text into a Document tree.

    Attribute values carry the byte offset at which they start in *text*.
    """
    builder = _TreeBuilder(text)
    builder.feed(text)
    builder.close()
    return builder.document
