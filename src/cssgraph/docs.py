"""External documentation targets for CSS properties."""

from __future__ import annotations

import re

# Mozilla Developer Network CSS reference root URL.
MDN_CSS_REFERENCE_URL = "https://developer.mozilla.org/en-US/docs/Web/CSS/"

_VENDOR_PREFIX_RE = re.compile(r"^(?:-webkit-|-moz-|-ms-|-o-)")


def strip_vendor_prefix(prop: str) -> str:
    """Drop one leading vendor prefix, e.g. ``-webkit-transform`` -> ``transform``."""
    return _VENDOR_PREFIX_RE.sub("", prop, count=1)


def mdn_path(prop: str, root: str = MDN_CSS_REFERENCE_URL) -> str:
    """Return the documentation path for a CSS property.

    Vendor-prefixed and standard spellings resolve to the same page. The
    name is otherwise used as written.
    """
    return root + strip_vendor_prefix(prop)
