"""Exception types raised by cssgraph."""

from __future__ import annotations


class CSSGraphError(Exception):
    """Base class for all cssgraph errors."""


class InputError(CSSGraphError):
    """Raised when request input (JSON, unit descriptors) is malformed."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        super().__init__(message)


class ConfigError(InputError):
    """Raised when a configuration object has a known key with a bad value."""

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        super().__init__(message, source="config")


class GraphStateError(CSSGraphError):
    """Raised when definitions are written after, or read before, the freeze point."""
