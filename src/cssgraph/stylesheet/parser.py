"""Stylesheet parser built on tinycss2.

Turns CSS source into StyleRule objects carrying the selector chains and
declaration names together with their source positions. Syntax errors never
abort parsing; they are collected on ``Stylesheet.errors``.

Example:
    .panel, h1.title { color: red; -webkit-transform: none; }
    @media print { #app { display: none; } }
"""

from __future__ import annotations

import re
from collections.abc import Iterable

import tinycss2
import tinycss2.ast

from cssgraph.offsets import CSS_LINE_BREAKS, TextIndex
from cssgraph.stylesheet.model import (
    Declaration,
    SelectorChain,
    StyleRule,
    Stylesheet,
    SyntaxIssue,
)

__all__ = ["parse_stylesheet"]

# At-rules whose block holds ordinary style rules.
_GROUP_AT_RULES = frozenset(
    {
        "media",
        "supports",
        "document",
        "-moz-document",
        "layer",
        "container",
        "scope",
        "starting-style",
    }
)

_KEYFRAMES_RE = re.compile(r"(?:-[a-z]+-)?keyframes")

_SKIPPED_TYPES = frozenset({"whitespace", "comment"})


def _is_comma(token: tinycss2.ast.Node) -> bool:
    return token.type == "literal" and token.value == ","


def _trim(tokens: list[tinycss2.ast.Node]) -> list[tinycss2.ast.Node]:
    """Strip leading and trailing whitespace and comments."""
    start, end = 0, len(tokens)
    while start < end and tokens[start].type in _SKIPPED_TYPES:
        start += 1
    while end > start and tokens[end - 1].type in _SKIPPED_TYPES:
        end -= 1
    return tokens[start:end]


def _chain_end(text: str, pos: int) -> int:
    """Return the index of the top-level ``,`` or ``{`` ending the chain at *pos*."""
    depth = 0
    quote = ""
    i, n = pos, len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if quote:
            # An unescaped newline ends a bad string.
            if ch == quote or ch in "\r\n\f":
                quote = ""
        elif text.startswith("/*", i):
            close = text.find("*/", i + 2)
            i = n if close < 0 else close + 2
            continue
        elif ch in "\"'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(depth - 1, 0)
        elif ch in ",{" and depth == 0:
            return i
        i += 1
    return n


def _strip_trailing(value: str) -> str:
    """Drop trailing whitespace and comments."""
    value = value.rstrip()
    while value.endswith("*/") and "/*" in value:
        value = value[: value.rfind("/*")].rstrip()
    return value


class _RuleCollector:
    """Flatten a tinycss2 node tree into StyleRule objects in source order."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.index = TextIndex(text, CSS_LINE_BREAKS)
        self.rules: list[StyleRule] = []
        self.errors: list[SyntaxIssue] = []

    def _error(self, node: tinycss2.ast.ParseError) -> None:
        self.errors.append(
            SyntaxIssue(
                message=f"{node.kind}: {node.message}",
                line=node.source_line,
                column=node.source_column,
            )
        )

    def rule_list(self, nodes: Iterable[tinycss2.ast.Node]) -> None:
        """Handle the top level of a stylesheet or a group at-rule block."""
        for node in nodes:
            if node.type == "qualified-rule":
                self.qualified_rule(node)
            elif node.type == "at-rule":
                self.at_rule(node, nested=False)
            elif node.type == "error":
                self._error(node)

    def _split_prelude(self, rule: tinycss2.ast.QualifiedRule) -> list[SelectorChain]:
        """Split a rule prelude on top-level commas into selector chains.

        Chain values are sliced from the source rather than re-serialized,
        so they match the file byte for byte.
        """
        groups: list[list[tinycss2.ast.Node]] = [[]]
        for token in rule.prelude:
            if _is_comma(token):
                groups.append([])
            else:
                groups[-1].append(token)

        chains: list[SelectorChain] = []
        for group in groups:
            tokens = _trim(group)
            if not tokens:
                chains.append(SelectorChain("", rule.source_line, rule.source_column))
                continue
            first = tokens[0]
            start = self.index.char_offset(first.source_line, first.source_column)
            if start is None:
                value = tinycss2.serialize(tokens)
            else:
                value = _strip_trailing(self.text[start : _chain_end(self.text, start)])
            chains.append(SelectorChain(value, first.source_line, first.source_column))
        return chains

    def qualified_rule(self, rule: tinycss2.ast.QualifiedRule) -> None:
        declarations, nested = self._block(rule.content)
        self.rules.append(StyleRule(selectors=self._split_prelude(rule), declarations=declarations))
        self._nested(nested)

    def at_rule(self, rule: tinycss2.ast.AtRule, nested: bool) -> None:
        if rule.content is None:  # @import, @charset, @namespace
            return
        keyword = rule.lower_at_keyword

        if keyword in _GROUP_AT_RULES:
            if nested:
                # Nested group rules may mix declarations and rules.
                declarations, children = self._block(rule.content)
                if declarations:
                    self.rules.append(StyleRule(selectors=[], declarations=declarations))
                self._nested(children)
            else:
                self.rule_list(
                    tinycss2.parse_rule_list(rule.content, skip_comments=True, skip_whitespace=True)
                )
            return

        if _KEYFRAMES_RE.fullmatch(keyword):
            # Keyframe selectors (from, to, 50%) never name an element.
            for frame in tinycss2.parse_rule_list(
                rule.content, skip_comments=True, skip_whitespace=True
            ):
                if frame.type == "qualified-rule":
                    declarations, _ = self._block(frame.content)
                    self.rules.append(StyleRule(selectors=[], declarations=declarations))
                elif frame.type == "error":
                    self._error(frame)
            return

        # @font-face, @page, @counter-style, ...
        declarations, children = self._block(rule.content)
        self.rules.append(StyleRule(selectors=[], declarations=declarations))
        for child in children:
            if child.type == "at-rule":
                self.at_rule(child, nested=True)

    def _block(
        self, content: list[tinycss2.ast.Node] | None
    ) -> tuple[list[Declaration], list[tinycss2.ast.Node]]:
        """Split a block into its declarations and its nested rules."""
        declarations: list[Declaration] = []
        nested: list[tinycss2.ast.Node] = []
        if not content:
            return declarations, nested
        for node in tinycss2.parse_blocks_contents(
            content, skip_comments=True, skip_whitespace=True
        ):
            if node.type == "declaration":
                declarations.append(
                    Declaration(property=node.name, line=node.source_line, column=node.source_column)
                )
            elif node.type in ("qualified-rule", "at-rule"):
                nested.append(node)
            elif node.type == "error":
                self._error(node)
        return declarations, nested

    def _nested(self, nodes: list[tinycss2.ast.Node]) -> None:
        for node in nodes:
            if node.type == "qualified-rule":
                self.qualified_rule(node)
            else:
                self.at_rule(node, nested=True)


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse CSS source into a Stylesheet.

    Returns a Stylesheet containing all rules in source order; rules nested
    in group at-rules or in other rules are flattened after their parent.
    """
    collector = _RuleCollector(source)
    collector.rule_list(tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True))
    return Stylesheet(rules=collector.rules, errors=collector.errors)
