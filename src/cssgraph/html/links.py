"""Stylesheet linkage: which stylesheet files an HTML document pulls in."""

from __future__ import annotations

import logging
import posixpath
from html.parser import HTMLParser
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

__all__ = ["normalize_stylesheet_href", "stylesheet_links"]


class _LinkCollector(HTMLParser):
    """Token-level scan for ``<link rel="stylesheet" href="...">`` tags."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.hrefs: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        # Also reached for self-closing tags via handle_startendtag.
        if tag != "link":
            return
        href = ""
        is_stylesheet = False
        for key, value in attrs:
            if key == "href":
                href = value or ""
            elif key == "rel" and value:
                is_stylesheet = "stylesheet" in value.lower().split()
        if is_stylesheet:
            self.hrefs.append(href)


def normalize_stylesheet_href(href: str, base_dir: str) -> str | None:
    """Resolve *href* against the directory of the linking HTML file.

    Returns a ``/``-separated path relative to the unit root, or None for
    hrefs that cannot name a file of the unit (absolute URLs, empty hrefs).
    """
    parts = urlsplit(href.strip())
    if parts.scheme or parts.netloc:
        return None
    path = parts.path.lstrip("/")
    if not path:
        return None
    return posixpath.normpath(posixpath.join(base_dir.replace("\\", "/"), path))


def stylesheet_links(text: str, file_path: str) -> list[str]:
    """Return the normalized paths of every stylesheet linked from *text*.

    *file_path* is the HTML file's unit-relative path; hrefs are resolved
    relative to its directory. Link tags are honored wherever they appear,
    not only inside ``<head>``.
    """
    collector = _LinkCollector()
    collector.feed(text)
    collector.close()

    base_dir = posixpath.dirname(file_path.replace("\\", "/"))
    links: list[str] = []
    for href in collector.hrefs:
        path = normalize_stylesheet_href(href, base_dir)
        if path is None:
            logger.debug("%s: ignoring stylesheet link %r", file_path, href)
            continue
        if path not in links:
            links.append(path)
    return links
