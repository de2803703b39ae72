"""Two-phase definition store shared by the stylesheet and HTML passes."""

from __future__ import annotations

from cssgraph.errors import GraphStateError
from cssgraph.model.graph import Definition


class GraphContext:
    """Holds the definitions of one source unit.

    Definitions are written during the stylesheet pass only. ``freeze()``
    ends that pass; from then on the set is read-only and may be queried
    by the HTML pass. Writing after the freeze, or reading before it,
    raises GraphStateError.
    """

    def __init__(self) -> None:
        self._defs: list[Definition] = []
        self._keys: set[tuple[str, str]] = set()
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    # --- stylesheet pass --------------------------------------------------

    def add(self, definition: Definition) -> bool:
        """Record *definition*; return False if an equal (name, path) exists."""
        if self._frozen:
            raise GraphStateError(
                f"cannot add definition {definition.path!r}: definitions are frozen"
            )
        key = (definition.name, definition.path)
        if key in self._keys:
            return False
        self._keys.add(key)
        self._defs.append(definition)
        return True

    # --- HTML pass --------------------------------------------------------

    @property
    def definitions(self) -> list[Definition]:
        if not self._frozen:
            raise GraphStateError("definitions are still being collected; call freeze() first")
        return list(self._defs)

    def visible(self, stylesheets: list[str]) -> dict[str, Definition]:
        """Map selector name to the first definition from one of *stylesheets*."""
        files = set(stylesheets)
        result: dict[str, Definition] = {}
        for definition in self.definitions:
            if definition.file in files and definition.name not in result:
                result[definition.name] = definition
        return result
