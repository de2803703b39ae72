"""Selector normalization: reduce a selector chain to its addressable tail.

Only the rightmost id or class component of a chain is used as a definition
key, so ``.panel > .panel-body`` and ``div .panel-body`` both define
``.panel-body``.
"""

from __future__ import annotations

import re

__all__ = [
    "ATTR_SEPARATOR",
    "last_selector",
    "normalize",
    "selector_kind",
    "selector_prefix",
    "split_tokens",
]

# Separator between multiple tokens of one id/class attribute value.
ATTR_SEPARATOR = " "

_COMBINATOR_RE = re.compile(r"[>+~]")

# Greedy prefix: captures the last "#" or "." followed by at least one char.
_TAIL_RE = re.compile(r".*([.#].+)", re.DOTALL)

_PREFIXES = {"id": "#", "class": "."}


def last_selector(chain: str) -> str | None:
    """Return the trailing id/class component of *chain*, or None.

    The chain is split on the ``>``, ``+`` and ``~`` combinators and the
    last non-empty fragment is searched for an id or class component.
    Bare tag selectors and unsupported syntax yield None.
    """
    fragments = [f for f in _COMBINATOR_RE.split(chain) if f]
    if not fragments:
        return None
    match = _TAIL_RE.fullmatch(fragments[-1].strip())
    if match is None:
        return None
    return match.group(1)


normalize = last_selector


def selector_kind(selector: str) -> str:
    """Return ``"id"`` or ``"class"`` for a normalized selector, else ``""``."""
    if selector.startswith("#"):
        return "id"
    if selector.startswith("."):
        return "class"
    return ""


def selector_prefix(attr_key: str) -> str:
    """Map an HTML attribute name to its selector prefix (``#`` or ``.``)."""
    return _PREFIXES.get(attr_key, "")


def split_tokens(value: str) -> list[str]:
    """Split an id/class attribute value into its tokens."""
    return value.split(ATTR_SEPARATOR)
