"""Combinator engine: every selector string through which an element is reachable.

Given an element and the selector it matched on its own (``.aside``), the
functions below walk the document tree and spell out the descendant
(``#app .aside``), child (``#main > .aside``), adjacent sibling
(``.nav + .aside``) and general sibling (``.nav ~ .aside``) selectors that
would also select it. The tree is only read, never modified.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from cssgraph.html.document import Document, Node
from cssgraph.selector import selector_prefix, split_tokens

__all__ = [
    "COMBINATORS",
    "SelectorNode",
    "adjacent_selectors",
    "child_selectors",
    "combinator_selectors",
    "descendant_selectors",
    "general_selectors",
    "node_selectors",
]


@dataclass(frozen=True)
class SelectorNode:
    """A selector string together with the node it was built on."""

    selector: str
    node: Node


def node_selectors(node: Node) -> Iterator[str]:
    """Yield ``#id`` and ``.class`` selectors for *node*, in attribute order."""
    for attr in node.attrs:
        prefix = selector_prefix(attr.key)
        if not prefix:
            continue
        for token in split_tokens(attr.value):
            if token:
                yield prefix + token


def descendant_selectors(document: Document, target: SelectorNode) -> list[str]:
    """Build all descendant-combinator selectors for *target*.

    Walks up to the root. Each ancestor token is prepended to the target
    selector and to every selector already built on a lower ancestor, so
    multi-level chains such as ``#app #wrap .sel`` are produced as well.
    """
    built: list[SelectorNode] = []
    for ancestor in document.ancestors(target.node):
        if not ancestor.is_element:
            continue
        for token in node_selectors(ancestor):
            below = [s for s in built if s.node.index != ancestor.index]
            for s in below:
                built.append(SelectorNode(f"{token} {s.selector}", ancestor))
            built.append(SelectorNode(f"{token} {target.selector}", ancestor))
    return [s.selector for s in built]


def child_selectors(document: Document, target: SelectorNode) -> list[str]:
    """Build all child-combinator selectors for *target*.

    Like descendant_selectors, but a selector only extends to an ancestor
    that is the direct parent of the node it was built on.
    """
    built: list[SelectorNode] = []
    for ancestor in document.ancestors(target.node):
        if not ancestor.is_element:
            continue
        for token in node_selectors(ancestor):
            below = [
                s
                for s in built
                if s.node.index != ancestor.index and s.node.parent == ancestor.index
            ]
            for s in below:
                built.append(SelectorNode(f"{token} > {s.selector}", ancestor))
            if target.node.parent == ancestor.index:
                built.append(SelectorNode(f"{token} > {target.selector}", ancestor))
    return [s.selector for s in built]


def _sibling_selectors(document: Document, target: SelectorNode, combinator: str) -> list[str]:
    prev = document.previous_element_sibling(target.node)
    if prev is None:
        return []
    return [f"{token} {combinator} {target.selector}" for token in node_selectors(prev)]


def adjacent_selectors(document: Document, target: SelectorNode) -> list[str]:
    """Build adjacent-sibling selectors from the previous element sibling."""
    return _sibling_selectors(document, target, "+")


def general_selectors(document: Document, target: SelectorNode) -> list[str]:
    """Build general-sibling selectors.

    Only the previous element sibling is consulted, not every preceding
    one, so the result has the same shape as adjacent_selectors.
    """
    return _sibling_selectors(document, target, "~")


CombinatorFn = Callable[[Document, SelectorNode], list[str]]

# Priority order used when resolving references.
COMBINATORS: tuple[CombinatorFn, ...] = (
    descendant_selectors,
    child_selectors,
    adjacent_selectors,
    general_selectors,
)


def combinator_selectors(document: Document, target: SelectorNode) -> Iterator[str]:
    """Yield candidates from each combinator in priority order.

    Later combinators are only computed if the caller keeps iterating.
    """
    for combinator in COMBINATORS:
        yield from combinator(document, target)
