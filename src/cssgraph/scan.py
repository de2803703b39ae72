"""Discovery: find the CSS and HTML files of a directory tree."""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Iterator
from pathlib import Path

from cssgraph.config import GraphConfig
from cssgraph.model.unit import SourceUnit

logger = logging.getLogger(__name__)

__all__ = ["discover", "is_css_file", "is_html_file", "unit_name"]


def _has_suffix(filename: str, suffixes: tuple[str, ...], min_marker: str) -> bool:
    for suffix in suffixes:
        if filename.endswith(suffix) and not filename.endswith(min_marker + suffix):
            return True
    return False


def is_css_file(filename: str, config: GraphConfig | None = None) -> bool:
    """True for ``.css`` files that are not minified (``.min.css``)."""
    config = config or GraphConfig()
    return _has_suffix(filename, config.css_suffixes, config.min_marker)


def is_html_file(filename: str, config: GraphConfig | None = None) -> bool:
    """True for ``.htm``/``.html`` files (any case) that are not minified."""
    config = config or GraphConfig()
    return _has_suffix(filename.lower(), config.html_suffixes, config.min_marker)


def _walk(directory: Path) -> Iterator[Path]:
    """Yield files under *directory* in lexical order, depth first."""
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir() and not entry.is_symlink():
            yield from _walk(entry)
        elif entry.is_file():
            yield entry


def unit_name(root: Path) -> str:
    """Name a unit after its root directory; a filesystem root has no basename."""
    return root.name or root.as_posix()


def _excluded(rel_path: str, patterns: tuple[str, ...]) -> bool:
    return any(fnmatch.fnmatch(rel_path, pattern) for pattern in patterns)


def discover(root: str | Path = ".", config: GraphConfig | None = None) -> SourceUnit:
    """Collect every CSS and HTML file under *root* into a single unit.

    The unit is named after the root directory; file paths are relative
    to *root* and always ``/``-separated.
    """
    config = config or GraphConfig()
    root = Path(root).resolve()
    files: list[str] = []
    for path in _walk(root):
        rel_path = path.relative_to(root).as_posix()
        if not (is_css_file(rel_path, config) or is_html_file(rel_path, config)):
            continue
        if _excluded(rel_path, config.exclude):
            logger.debug("excluded %s", rel_path)
            continue
        files.append(rel_path)
    logger.info("discovered %d files under %s", len(files), root)
    return SourceUnit(name=unit_name(root), type=config.unit_type, dir=".", files=files)
