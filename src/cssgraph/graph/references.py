"""Reference resolver: link HTML id/class tokens to selector definitions."""

from __future__ import annotations

import html
import logging

from cssgraph.graph.combinators import SelectorNode, combinator_selectors
from cssgraph.graph.context import GraphContext
from cssgraph.html.document import Document, Node
from cssgraph.html.links import stylesheet_links
from cssgraph.html.parser import parse_document
from cssgraph.model.graph import Definition, Reference
from cssgraph.model.span import Span
from cssgraph.selector import ATTR_SEPARATOR, selector_prefix, split_tokens

logger = logging.getLogger(__name__)

_SEPARATOR_BYTES = len(ATTR_SEPARATOR.encode("utf-8"))


def resolve_definition(
    document: Document,
    node: Node,
    selector: str,
    visible: dict[str, Definition],
) -> Definition | None:
    """Find the definition *selector* on *node* refers to.

    A direct name match wins; otherwise the descendant, child, adjacent and
    general sibling selectors of the node are tried, in that order.
    """
    definition = visible.get(selector)
    if definition is not None:
        return definition
    for candidate in combinator_selectors(document, SelectorNode(selector, node)):
        definition = visible.get(candidate)
        if definition is not None:
            return definition
    return None


class ReferenceResolver:
    """Build the references of the HTML files of one unit."""

    def __init__(self, context: GraphContext, unit: str, unit_type: str):
        self.context = context
        self.unit = unit
        self.unit_type = unit_type

    def build(self, text: str, file_path: str) -> list[Reference]:
        """Return references from *file_path*'s id/class tokens to visible definitions."""
        links = stylesheet_links(text, file_path)
        visible = self.context.visible(links)
        if not visible:
            # Nothing this document could refer to; skip building its tree.
            logger.debug("%s: no definitions from linked stylesheets %s", file_path, links)
            return []

        document = parse_document(text)
        refs: list[Reference] = []
        for node in document.elements():
            refs.extend(self._node_refs(document, node, visible, file_path))
        return refs

    def _node_refs(
        self,
        document: Document,
        node: Node,
        visible: dict[str, Definition],
        file_path: str,
    ) -> list[Reference]:
        refs: list[Reference] = []
        for attr in node.attrs:
            prefix = selector_prefix(attr.key)
            if not prefix or attr.value_start is None:
                continue
            # Spans are measured on the value as written; names use the
            # decoded token.
            raw = attr.raw_value if attr.raw_value is not None else attr.value
            # Byte offset of the current token within the file.
            start = attr.value_start
            for raw_token in split_tokens(raw):
                end = start + len(raw_token.encode("utf-8"))
                token = html.unescape(raw_token)
                definition = (
                    resolve_definition(document, node, prefix + token, visible)
                    if token
                    else None
                )
                if definition is not None:
                    refs.append(
                        Reference(
                            def_unit_type=self.unit_type,
                            def_unit=self.unit,
                            def_path=definition.path,
                            unit=self.unit,
                            file=file_path,
                            span=Span(start, end),
                        )
                    )
                start = end + _SEPARATOR_BYTES
        return refs
