"""Stylesheet model: SelectorChain, Declaration, StyleRule, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SelectorChain:
    """One comma-separated selector of a rule, as written.

    ``line`` and ``column`` are 1-based and point at the first character
    of ``value``.
    """

    value: str  # ".panel > .panel-body", "h1.title", "" for a malformed chain
    line: int
    column: int


@dataclass(frozen=True)
class Declaration:
    """A property declaration; the position points at the property name."""

    property: str
    line: int
    column: int


@dataclass(frozen=True)
class StyleRule:
    """A rule pairing its selector chains with its declarations.

    Rules from at-rules without selectors (``@font-face``, keyframe
    blocks) carry an empty ``selectors`` list.
    """

    selectors: list[SelectorChain]
    declarations: list[Declaration]


@dataclass(frozen=True)
class SyntaxIssue:
    """A recoverable syntax error reported while parsing."""

    message: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.message}"


@dataclass(frozen=True)
class Stylesheet:
    """All rules of one stylesheet in source order, plus any syntax issues."""

    rules: list[StyleRule]
    errors: list[SyntaxIssue] = field(default_factory=list)
