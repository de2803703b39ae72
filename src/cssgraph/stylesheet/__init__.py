from cssgraph.stylesheet.parser import parse_stylesheet
from cssgraph.stylesheet.model import (
    Declaration,
    SelectorChain,
    StyleRule,
    Stylesheet,
    SyntaxIssue,
)

__all__ = [
    "parse_stylesheet",
    "Stylesheet",
    "StyleRule",
    "SelectorChain",
    "Declaration",
    "SyntaxIssue",
]
