"""Source unit model: the set of files graphed together."""

from __future__ import annotations

from dataclasses import dataclass, field

UNIT_TYPE = "basic-css"


@dataclass(frozen=True)
class SourceUnit:
    """A named collection of files, resolved relative to ``dir``."""

    name: str
    type: str = UNIT_TYPE
    dir: str = "."
    files: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("SourceUnit name must be a non-empty string")
