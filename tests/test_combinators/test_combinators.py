"""Tests for the combinator engine."""

import pytest

from cssgraph.graph.combinators import (
    SelectorNode,
    adjacent_selectors,
    child_selectors,
    combinator_selectors,
    descendant_selectors,
    general_selectors,
    node_selectors,
)
from cssgraph.html import Attribute, Document, NodeType, parse_document


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _element(document: Document, parent: int, **attrs: str) -> int:
    # "class_" because "class" is a keyword.
    attributes = tuple(Attribute(key.rstrip("_"), value) for key, value in attrs.items())
    return document.append_child(parent, NodeType.ELEMENT, "div", attributes)


@pytest.fixture()
def descendant_tree() -> tuple[Document, int]:
    document = Document()
    app = _element(document, 0, id="app")
    wrapper = _element(document, app, id="container-wrapper", class_="col-xs-6")
    container = _element(
        document, wrapper, id="container container2", class_="section col-xs-12 center"
    )
    target = _element(document, container, class_="container-inner col-xs-12")
    return document, target


@pytest.fixture()
def child_tree() -> tuple[Document, int]:
    document = Document()
    wrapper = _element(document, 0, id="container-wrapper", class_="col-xs-6")
    container = _element(document, wrapper, id="container container2", class_="section")
    target = _element(document, container, id="container-inner", class_="container-inner")
    return document, target


def _target(document: Document, handle: int, selector: str) -> SelectorNode:
    return SelectorNode(selector, document[handle])


# ---------------------------------------------------------------------------
# Token enumeration
# ---------------------------------------------------------------------------


class TestNodeSelectors:
    def test_ids_and_classes_in_attribute_order(self):
        document = Document()
        node = _element(document, 0, id="a b", class_="c", title="x")
        assert list(node_selectors(document[node])) == ["#a", "#b", ".c"]

    def test_empty_tokens_skipped(self):
        document = Document()
        node = _element(document, 0, class_="c  d ")
        assert list(node_selectors(document[node])) == [".c", ".d"]


# ---------------------------------------------------------------------------
# Descendant combinator
# ---------------------------------------------------------------------------


DESCENDANT_EXPECTED = [
    "#app .container-inner",
    "#app #container-wrapper .container-inner",
    "#app #container-wrapper #container .container-inner",
    "#app #container-wrapper #container2 .container-inner",
    "#app #container-wrapper .section .container-inner",
    "#app #container-wrapper .col-xs-12 .container-inner",
    "#app #container-wrapper .center .container-inner",
    "#app .col-xs-6 .container-inner",
    "#app .col-xs-6 #container .container-inner",
    "#app .col-xs-6 #container2 .container-inner",
    "#app .col-xs-6 .section .container-inner",
    "#app .col-xs-6 .col-xs-12 .container-inner",
    "#app .col-xs-6 .center .container-inner",
    "#app #container .container-inner",
    "#app #container2 .container-inner",
    "#app .section .container-inner",
    "#app .col-xs-12 .container-inner",
    "#app .center .container-inner",
    "#container-wrapper .container-inner",
    "#container-wrapper #container .container-inner",
    "#container-wrapper #container2 .container-inner",
    "#container-wrapper .section .container-inner",
    "#container-wrapper .col-xs-12 .container-inner",
    "#container-wrapper .center .container-inner",
    ".col-xs-6 .container-inner",
    ".col-xs-6 #container .container-inner",
    ".col-xs-6 #container2 .container-inner",
    ".col-xs-6 .section .container-inner",
    ".col-xs-6 .col-xs-12 .container-inner",
    ".col-xs-6 .center .container-inner",
    "#container .container-inner",
    "#container2 .container-inner",
    ".section .container-inner",
    ".col-xs-12 .container-inner",
    ".center .container-inner",
]


class TestDescendantSelectors:
    def test_all_chains(self, descendant_tree):
        document, target = descendant_tree
        got = descendant_selectors(document, _target(document, target, ".container-inner"))
        assert sorted(got) == sorted(DESCENDANT_EXPECTED)

    def test_no_duplicates(self, descendant_tree):
        document, target = descendant_tree
        got = descendant_selectors(document, _target(document, target, ".container-inner"))
        assert len(got) == len(set(got))

    def test_innermost_ancestor_first(self, descendant_tree):
        document, target = descendant_tree
        got = descendant_selectors(document, _target(document, target, ".container-inner"))
        assert got[:5] == [
            "#container .container-inner",
            "#container2 .container-inner",
            ".section .container-inner",
            ".col-xs-12 .container-inner",
            ".center .container-inner",
        ]
        assert got[-1] == "#app .container-inner"

    def test_target_tokens_never_used(self, descendant_tree):
        document, target = descendant_tree
        got = descendant_selectors(document, _target(document, target, ".container-inner"))
        assert not any(s.startswith(".container-inner") for s in got)

    def test_root_element_has_none(self):
        document = Document()
        node = _element(document, 0, id="app")
        assert descendant_selectors(document, _target(document, node, "#app")) == []

    def test_tree_is_not_mutated(self, descendant_tree):
        document, target = descendant_tree
        before = [(n.parent, n.first_child, n.next_sibling, n.attrs) for n in document.nodes]
        descendant_selectors(document, _target(document, target, ".container-inner"))
        child_selectors(document, _target(document, target, ".container-inner"))
        after = [(n.parent, n.first_child, n.next_sibling, n.attrs) for n in document.nodes]
        assert before == after


# ---------------------------------------------------------------------------
# Child combinator
# ---------------------------------------------------------------------------


CHILD_EXPECTED = [
    "#container > .container-inner",
    "#container2 > .container-inner",
    ".section > .container-inner",
    "#container-wrapper > #container > .container-inner",
    "#container-wrapper > #container2 > .container-inner",
    "#container-wrapper > .section > .container-inner",
    ".col-xs-6 > #container > .container-inner",
    ".col-xs-6 > #container2 > .container-inner",
    ".col-xs-6 > .section > .container-inner",
]


class TestChildSelectors:
    def test_only_parent_edges(self, child_tree):
        document, target = child_tree
        got = child_selectors(document, _target(document, target, ".container-inner"))
        assert sorted(got) == sorted(CHILD_EXPECTED)

    def test_no_generation_skipped(self, descendant_tree):
        document, target = descendant_tree
        got = child_selectors(document, _target(document, target, ".container-inner"))
        assert "#app > .container-inner" not in got
        assert "#container-wrapper > .container-inner" not in got
        assert "#app > #container-wrapper > #container > .container-inner" in got
        # 5 parent tokens, 2 x 5 grandparent chains, 1 x 10 great-grandparent chains.
        assert len(got) == 25


# ---------------------------------------------------------------------------
# Sibling combinators
# ---------------------------------------------------------------------------


class TestSiblingSelectors:
    @pytest.fixture()
    def siblings(self) -> tuple[Document, int]:
        document = Document()
        parent = _element(document, 0, class_="row")
        _element(document, parent, id="first", class_="far")
        _element(document, parent, id="toolbar-aside", class_="section col-xs-6 center")
        document.append_child(parent, NodeType.TEXT)
        target = _element(document, parent, id="content-aside", class_="aside")
        return document, target

    def test_adjacent(self, siblings):
        document, target = siblings
        got = adjacent_selectors(document, _target(document, target, ".aside"))
        assert sorted(got) == sorted(
            [
                "#toolbar-aside + .aside",
                ".section + .aside",
                ".col-xs-6 + .aside",
                ".center + .aside",
            ]
        )

    def test_general_only_previous_sibling(self, siblings):
        document, target = siblings
        got = general_selectors(document, _target(document, target, ".aside"))
        assert sorted(got) == sorted(
            [
                "#toolbar-aside ~ .aside",
                ".section ~ .aside",
                ".col-xs-6 ~ .aside",
                ".center ~ .aside",
            ]
        )
        assert "#first ~ .aside" not in got

    def test_general_two_tokens(self):
        document = Document()
        _element(document, 0, id="aside-second-sibling", class_="col-xs-6")
        target = _element(document, 0, class_="aside")
        got = general_selectors(document, _target(document, target, ".aside"))
        assert sorted(got) == sorted(["#aside-second-sibling ~ .aside", ".col-xs-6 ~ .aside"])

    def test_no_previous_sibling(self):
        document = Document()
        parent = _element(document, 0, class_="row")
        target = _element(document, parent, class_="aside")
        sn = _target(document, target, ".aside")
        assert adjacent_selectors(document, sn) == []
        assert general_selectors(document, sn) == []

    def test_other_attributes_ignored(self):
        document = Document()
        _element(document, 0, title="hello", href="x")
        target = _element(document, 0, class_="aside")
        assert adjacent_selectors(document, _target(document, target, ".aside")) == []


# ---------------------------------------------------------------------------
# Priority order
# ---------------------------------------------------------------------------


class TestCombinatorSelectors:
    def test_descendant_then_child(self, child_tree):
        document, target = child_tree
        sn = _target(document, target, ".container-inner")
        desc = descendant_selectors(document, sn)
        child = child_selectors(document, sn)
        got = list(combinator_selectors(document, sn))
        assert len(desc) == 11
        assert got == desc + child

    def test_sibling_candidates_last(self):
        document = parse_document(
            '<div id="wrap"><p class="intro"></p> <p class="body"></p></div>'
        )
        target = next(n for n in document.elements() if n.attrs and n.attrs[0].value == "body")
        got = list(combinator_selectors(document, SelectorNode(".body", target)))
        assert got == ["#wrap .body", "#wrap > .body", ".intro + .body", ".intro ~ .body"]
