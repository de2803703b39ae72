"""cssgraph -- cross-reference graph between CSS selectors and HTML usages."""

__version__ = "0.1.0"
