"""cssgraph model layer -- public type re-exports."""

from cssgraph.model.graph import DefData, Definition, GraphOutput, Reference
from cssgraph.model.span import Span
from cssgraph.model.unit import UNIT_TYPE, SourceUnit

__all__ = [
    # span
    "Span",
    # graph
    "DefData",
    "Definition",
    "Reference",
    "GraphOutput",
    # unit
    "UNIT_TYPE",
    "SourceUnit",
]
