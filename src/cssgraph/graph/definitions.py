"""Definition builder: selector definitions and property documentation refs.

Every addressable selector of a stylesheet becomes one Definition, keyed by
its stylesheet path and normalized selector, plus a Reference marking the
definition site. Every declaration becomes a Reference to the property's
documentation page.
"""

from __future__ import annotations

import logging

from cssgraph.config import GraphConfig
from cssgraph.docs import mdn_path
from cssgraph.graph.context import GraphContext
from cssgraph.model.graph import DefData, Definition, GraphOutput, Reference
from cssgraph.offsets import CSS_LINE_BREAKS, TextIndex
from cssgraph.selector import last_selector, selector_kind
from cssgraph.stylesheet.model import SelectorChain, StyleRule, Stylesheet

logger = logging.getLogger(__name__)


def definition_path(file_path: str, selector: str) -> str:
    """Return the definition path of *selector* in *file_path*, e.g. ``a.css.panel``."""
    return f"{file_path}{selector}"


class DefinitionBuilder:
    """Build definitions and references for the stylesheets of one unit."""

    def __init__(self, context: GraphContext, unit: str, config: GraphConfig | None = None):
        self.context = context
        self.unit = unit
        self.config = config or GraphConfig()

    def build(self, stylesheet: Stylesheet, text: str, file_path: str) -> GraphOutput:
        """Graph one parsed stylesheet whose source is *text*."""
        out = GraphOutput()
        index = TextIndex(text, CSS_LINE_BREAKS)
        for issue in stylesheet.errors:
            logger.warning("%s:%s: CSS syntax error, skipped", file_path, issue)
        for rule in stylesheet.rules:
            for chain in rule.selectors:
                if not chain.value:
                    logger.warning(
                        "%s:%d:%d: unexpected empty selector, possibly malformed CSS",
                        file_path,
                        chain.line,
                        chain.column,
                    )
                    continue
                definition = self._definition(chain, index, file_path)
                if definition is None:
                    continue
                out.defs.append(definition)
                out.refs.append(
                    Reference(
                        def_unit_type=definition.unit_type,
                        def_unit=definition.unit,
                        def_path=definition.path,
                        unit=definition.unit,
                        file=definition.file,
                        span=definition.span,
                        is_def=True,
                    )
                )
            out.refs.extend(self._documentation_refs(rule, index, file_path))
        return out

    def _definition(
        self, chain: SelectorChain, index: TextIndex, file_path: str
    ) -> Definition | None:
        span = index.locate(chain.line, chain.column, chain.value)
        if span is None:
            logger.warning(
                "%s:%d:%d: selector %r not found in source",
                file_path,
                chain.line,
                chain.column,
                chain.value,
            )

        selector = last_selector(chain.value)
        if selector is None:
            logger.debug("%s: no id or class selector in %r", file_path, chain.value)
            return None

        definition = Definition(
            unit_type=self.config.unit_type,
            unit=self.unit,
            path=definition_path(file_path, selector),
            name=selector,
            file=file_path,
            span=span,
            data=DefData(kind=selector_kind(selector)),
        )
        # Only the first occurrence of a selector in a stylesheet is kept.
        if not self.context.add(definition):
            return None
        return definition

    def _documentation_refs(
        self, rule: StyleRule, index: TextIndex, file_path: str
    ) -> list[Reference]:
        refs: list[Reference] = []
        for declaration in rule.declarations:
            refs.append(
                Reference(
                    def_unit_type=self.config.docs_unit_type,
                    def_unit=self.config.docs_unit,
                    def_path=mdn_path(declaration.property, self.config.docs_root),
                    unit=self.unit,
                    file=file_path,
                    span=index.locate(declaration.line, declaration.column, declaration.property),
                )
            )
        return refs
