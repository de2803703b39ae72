"""Graph configuration: unit types, documentation target and discovery filters."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from cssgraph.docs import MDN_CSS_REFERENCE_URL
from cssgraph.errors import ConfigError
from cssgraph.model.unit import UNIT_TYPE


@dataclass(frozen=True)
class GraphConfig:
    unit_type: str = UNIT_TYPE
    docs_unit_type: str = "URL"
    docs_unit: str = "MDN"
    docs_root: str = MDN_CSS_REFERENCE_URL
    css_suffixes: tuple[str, ...] = (".css",)
    html_suffixes: tuple[str, ...] = (".htm", ".html")
    min_marker: str = ".min"  # e.g. app.min.css is never graphed
    exclude: tuple[str, ...] = ()  # fnmatch globs on unit-relative paths

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> GraphConfig:
        """Build a config from the JSON object read on stdin.

        Only ``exclude`` and ``docsRoot`` are recognized; other keys are
        ignored so newer callers can pass settings older versions lack.
        """
        config = cls()
        if not data:
            return config
        if not isinstance(data, Mapping):
            raise ConfigError(f"config must be a JSON object, got {type(data).__name__}")

        if "exclude" in data:
            exclude = data["exclude"]
            if not isinstance(exclude, list) or not all(isinstance(p, str) for p in exclude):
                raise ConfigError("config 'exclude' must be a list of strings", key="exclude")
            config = replace(config, exclude=tuple(exclude))

        if "docsRoot" in data:
            docs_root = data["docsRoot"]
            if not isinstance(docs_root, str) or not docs_root:
                raise ConfigError("config 'docsRoot' must be a non-empty string", key="docsRoot")
            config = replace(config, docs_root=docs_root)

        return config
