"""HTML side of the graph: document tree, tree builder, stylesheet links."""

from cssgraph.html.document import Attribute, Document, Node, NodeType
from cssgraph.html.links import normalize_stylesheet_href, stylesheet_links
from cssgraph.html.parser import VOID_ELEMENTS, parse_document

__all__ = [
    # document
    "Attribute",
    "Document",
    "Node",
    "NodeType",
    # parser
    "VOID_ELEMENTS",
    "parse_document",
    # links
    "normalize_stylesheet_href",
    "stylesheet_links",
]
