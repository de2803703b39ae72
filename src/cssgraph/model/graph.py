"""Graph output model: Definition, Reference, and GraphOutput dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field

from cssgraph.model.span import Span


@dataclass(frozen=True)
class DefData:
    """Opaque payload attached to every selector definition."""

    kind: str  # "id" or "class"
    keyword: str = "selector"


@dataclass(frozen=True)
class Definition:
    """A CSS selector definition inside one stylesheet.

    ``path`` is the stylesheet path followed by the selector, e.g.
    ``css/app.css.panel``; it is the key References point at.
    ``span`` is None when the parser reported a position that does not
    exist in the file.
    """

    unit_type: str
    unit: str
    path: str
    name: str
    file: str
    span: Span | None
    data: DefData

    @property
    def kind(self) -> str:
        return self.data.kind


@dataclass(frozen=True)
class Reference:
    """A usage of a definition, or of an external documentation page."""

    def_unit_type: str
    def_unit: str
    def_path: str
    unit: str
    file: str
    span: Span | None
    is_def: bool = False


@dataclass
class GraphOutput:
    """All definitions and references produced for one source unit."""

    defs: list[Definition] = field(default_factory=list)
    refs: list[Reference] = field(default_factory=list)

    def extend(self, other: GraphOutput) -> None:
        self.defs.extend(other.defs)
        self.refs.extend(other.refs)
