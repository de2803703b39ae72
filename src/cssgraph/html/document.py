"""Arena-backed HTML document tree.

Nodes live in a flat list owned by the Document and refer to each other by
integer handle, so parent and sibling links never form reference cycles.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class NodeType(Enum):
    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"


@dataclass(frozen=True)
class Attribute:
    """An attribute as written on a start tag.

    ``value`` has character references decoded; ``raw_value`` is the value
    as written in the source. ``value_start`` is the byte offset of the
    value's first character in the source file, or None for a valueless
    attribute (``<input hidden>``).
    """

    key: str
    value: str
    value_start: int | None = None
    raw_value: str | None = None


@dataclass
class Node:
    """One node of the tree. Relations are handles into ``Document.nodes``."""

    index: int
    type: NodeType
    tag: str = ""
    attrs: tuple[Attribute, ...] = ()
    parent: int | None = None
    first_child: int | None = None
    last_child: int | None = None
    prev_sibling: int | None = None
    next_sibling: int | None = None

    @property
    def is_element(self) -> bool:
        return self.type is NodeType.ELEMENT


@dataclass
class Document:
    """An HTML document tree; node 0 is always the document root."""

    nodes: list[Node] = field(default_factory=lambda: [Node(index=0, type=NodeType.DOCUMENT)])

    @property
    def root(self) -> Node:
        return self.nodes[0]

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    # --- construction -----------------------------------------------------

    def append_child(
        self,
        parent: int,
        type: NodeType,
        tag: str = "",
        attrs: tuple[Attribute, ...] = (),
    ) -> int:
        """Create a node as the last child of *parent* and return its handle."""
        index = len(self.nodes)
        parent_node = self.nodes[parent]
        node = Node(index=index, type=type, tag=tag, attrs=attrs, parent=parent)
        if parent_node.last_child is None:
            parent_node.first_child = index
        else:
            self.nodes[parent_node.last_child].next_sibling = index
            node.prev_sibling = parent_node.last_child
        parent_node.last_child = index
        self.nodes.append(node)
        return index

    # --- navigation -------------------------------------------------------

    def parent(self, node: Node) -> Node | None:
        return None if node.parent is None else self.nodes[node.parent]

    def children(self, node: Node) -> Iterator[Node]:
        child = node.first_child
        while child is not None:
            yield self.nodes[child]
            child = self.nodes[child].next_sibling

    def ancestors(self, node: Node) -> Iterator[Node]:
        """Yield the parent, grandparent, ... up to and including the root."""
        current = self.parent(node)
        while current is not None:
            yield current
            current = self.parent(current)

    def previous_element_sibling(self, node: Node) -> Node | None:
        """Return the closest preceding sibling that is an element.

        Text and comment nodes between two elements do not break CSS
        sibling relations, so they are skipped.
        """
        prev = node.prev_sibling
        while prev is not None:
            candidate = self.nodes[prev]
            if candidate.is_element:
                return candidate
            prev = candidate.prev_sibling
        return None

    def walk(self, node: Node | None = None) -> Iterator[Node]:
        """Yield *node* (default: the root) and its descendants in document order."""
        stack = [node or self.root]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(list(self.children(current))))

    def elements(self) -> Iterator[Node]:
        return (n for n in self.walk() if n.is_element)
