"""Graph construction: definitions, combinators, references, orchestration."""

from cssgraph.graph.builder import build_graph, graph_unit
from cssgraph.graph.combinators import (
    SelectorNode,
    adjacent_selectors,
    child_selectors,
    combinator_selectors,
    descendant_selectors,
    general_selectors,
)
from cssgraph.graph.context import GraphContext
from cssgraph.graph.definitions import DefinitionBuilder, definition_path
from cssgraph.graph.references import ReferenceResolver, resolve_definition

__all__ = [
    "build_graph",
    "graph_unit",
    "GraphContext",
    "DefinitionBuilder",
    "definition_path",
    "ReferenceResolver",
    "resolve_definition",
    "SelectorNode",
    "descendant_selectors",
    "child_selectors",
    "adjacent_selectors",
    "general_selectors",
    "combinator_selectors",
]
