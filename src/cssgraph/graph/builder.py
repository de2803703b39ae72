"""Graph a source unit: all stylesheets first, then all HTML documents."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from cssgraph.config import GraphConfig
from cssgraph.errors import InputError
from cssgraph.graph.context import GraphContext
from cssgraph.graph.definitions import DefinitionBuilder
from cssgraph.graph.references import ReferenceResolver
from cssgraph.model.graph import GraphOutput
from cssgraph.model.unit import SourceUnit
from cssgraph.scan import is_css_file, is_html_file
from cssgraph.stylesheet import parse_stylesheet

logger = logging.getLogger(__name__)


def read_source(path: Path) -> str | None:
    """Read a UTF-8 source file; log and return None if it cannot be read."""
    try:
        return path.read_bytes().decode("utf-8")
    except OSError as exc:
        logger.warning("failed to read a source unit file: %s", exc)
    except UnicodeDecodeError as exc:
        logger.warning("failed to decode a source unit file %s: %s", path, exc)
    return None


def graph_unit(
    unit: SourceUnit,
    root: str | Path = ".",
    config: GraphConfig | None = None,
) -> GraphOutput:
    """Produce all definitions and references for *unit*.

    Unit files are read relative to ``root / unit.dir``. Every stylesheet
    is graphed before any HTML file, since references can only resolve
    against the complete definition set.
    """
    config = config or GraphConfig()
    base = Path(root) / unit.dir
    files = [f.replace("\\", "/") for f in unit.files]
    context = GraphContext()
    out = GraphOutput()

    definitions = DefinitionBuilder(context, unit.name, config)
    for file_path in files:
        if not is_css_file(file_path, config):
            continue
        text = read_source(base / file_path)
        if text is None:
            continue
        logger.debug("graphing stylesheet %s", file_path)
        out.extend(definitions.build(parse_stylesheet(text), text, file_path))

    context.freeze()

    resolver = ReferenceResolver(context, unit.name, config.unit_type)
    for file_path in files:
        if not is_html_file(file_path, config):
            continue
        text = read_source(base / file_path)
        if text is None:
            continue
        logger.debug("graphing document %s", file_path)
        out.refs.extend(resolver.build(text, file_path))

    logger.info(
        "unit %s: %d definitions, %d references", unit.name, len(out.defs), len(out.refs)
    )
    return out


def build_graph(
    units: Sequence[SourceUnit],
    root: str | Path = ".",
    config: GraphConfig | None = None,
) -> GraphOutput:
    """Graph exactly one source unit.

    Raises:
        InputError: if *units* is empty or holds more than one unit.
    """
    if not units:
        raise InputError("input contains no source unit data")
    if len(units) > 1:
        raise InputError("unexpected multiple units")
    return graph_unit(units[0], root, config)
