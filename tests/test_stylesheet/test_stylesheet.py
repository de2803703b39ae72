"""Tests for the stylesheet parser."""

from cssgraph.stylesheet import (
    Declaration,
    SelectorChain,
    StyleRule,
    Stylesheet,
    parse_stylesheet,
)


def _selectors(ss: Stylesheet) -> list[list[str]]:
    return [[c.value for c in rule.selectors] for rule in ss.rules]


def _properties(ss: Stylesheet) -> list[list[str]]:
    return [[d.property for d in rule.declarations] for rule in ss.rules]


# ---------------------------------------------------------------------------
# Selector chains
# ---------------------------------------------------------------------------


class TestSelectorChains:
    def test_comma_separated_chains(self):
        ss = parse_stylesheet(".panel, h1.title { color: red; }")
        assert len(ss.rules) == 1
        assert ss.rules[0].selectors == [
            SelectorChain(".panel", 1, 1),
            SelectorChain("h1.title", 1, 9),
        ]

    def test_chain_keeps_inner_whitespace(self):
        ss = parse_stylesheet(".panel  >  .panel-body { }")
        assert _selectors(ss) == [[".panel  >  .panel-body"]]

    def test_positions_on_later_lines(self):
        ss = parse_stylesheet(".a {\n  margin: 0;\n}\n#b { }")
        assert ss.rules[1].selectors == [SelectorChain("#b", 4, 1)]

    def test_empty_chain_is_kept(self):
        ss = parse_stylesheet(".a, , .b { }")
        assert _selectors(ss) == [[".a", "", ".b"]]

    def test_comments_are_not_part_of_chain(self):
        ss = parse_stylesheet("/* header */ .a /* x */ { }")
        assert _selectors(ss) == [[".a"]]

    def test_chain_is_sliced_from_source(self):
        ss = parse_stylesheet("li:nth-child(2n+1) .x { color: red }")
        assert ss.rules[0].selectors == [SelectorChain("li:nth-child(2n+1) .x", 1, 1)]

    def test_commas_and_braces_inside_chain(self):
        ss = parse_stylesheet('.a[title="{,}"] .b, :is(.c, .d) .e\n{ }')
        assert _selectors(ss) == [['.a[title="{,}"] .b', ":is(.c, .d) .e"]]

    def test_chain_spanning_lines(self):
        ss = parse_stylesheet(".a >\r\n  .b { }")
        assert _selectors(ss) == [[".a >\r\n  .b"]]


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


class TestDeclarations:
    def test_declaration_position(self):
        ss = parse_stylesheet(".panel, h1.title { color: red; }")
        assert ss.rules[0].declarations == [Declaration("color", 1, 20)]

    def test_multiline_declarations(self):
        ss = parse_stylesheet(".a {\n  margin: 0;\n  -webkit-transform: none;\n}")
        assert ss.rules[0].declarations == [
            Declaration("margin", 2, 3),
            Declaration("-webkit-transform", 3, 3),
        ]

    def test_important_declaration(self):
        ss = parse_stylesheet(".a { color: red !important; }")
        assert _properties(ss) == [["color"]]

    def test_rule_without_declarations(self):
        ss = parse_stylesheet(".a {}")
        assert ss.rules == [StyleRule(selectors=[SelectorChain(".a", 1, 1)], declarations=[])]


# ---------------------------------------------------------------------------
# At-rules
# ---------------------------------------------------------------------------


class TestAtRules:
    def test_media_rules_are_flattened(self):
        ss = parse_stylesheet("@media print { #app { display: none; } }")
        assert ss.rules == [
            StyleRule(
                selectors=[SelectorChain("#app", 1, 16)],
                declarations=[Declaration("display", 1, 23)],
            )
        ]

    def test_supports_rules(self):
        ss = parse_stylesheet("@supports (display: grid) { .grid { display: grid; } }")
        assert _selectors(ss) == [[".grid"]]

    def test_font_face_has_no_selectors(self):
        ss = parse_stylesheet("@font-face { font-family: X; src: url(a.woff); }")
        assert _selectors(ss) == [[]]
        assert _properties(ss) == [["font-family", "src"]]

    def test_keyframe_selectors_are_not_chains(self):
        ss = parse_stylesheet(
            "@keyframes spin { from { opacity: 0; } 50.5% { opacity: 1; } }"
        )
        assert _selectors(ss) == [[], []]
        assert _properties(ss) == [["opacity"], ["opacity"]]

    def test_import_is_ignored(self):
        ss = parse_stylesheet('@import "a.css";\n.a { }')
        assert _selectors(ss) == [[".a"]]


# ---------------------------------------------------------------------------
# Nesting
# ---------------------------------------------------------------------------


class TestNesting:
    def test_nested_rule_follows_parent(self):
        ss = parse_stylesheet(".card { color: red; .title { margin: 0; } }")
        assert _selectors(ss) == [[".card"], [".title"]]
        assert _properties(ss) == [["color"], ["margin"]]

    def test_nested_media_declarations(self):
        ss = parse_stylesheet(".card { @media print { display: none; } }")
        assert _selectors(ss) == [[".card"], []]
        assert _properties(ss) == [[], ["display"]]


# ---------------------------------------------------------------------------
# Errors and edge cases
# ---------------------------------------------------------------------------


class TestErrors:
    def test_empty_string(self):
        ss = parse_stylesheet("")
        assert ss.rules == []
        assert ss.errors == []

    def test_whitespace_only(self):
        assert parse_stylesheet("   \n\t  ").rules == []

    def test_unterminated_rule_is_reported(self):
        ss = parse_stylesheet(".a { color: red; }\n.b")
        assert _selectors(ss) == [[".a"]]
        assert len(ss.errors) == 1
        assert ss.errors[0].line == 2

    def test_bad_declaration_is_reported(self):
        ss = parse_stylesheet(".a { : red; color: blue; }")
        assert _properties(ss) == [["color"]]
        assert ss.errors
