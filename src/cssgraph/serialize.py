"""JSON shapes for source units and graph output."""

from __future__ import annotations

import json
from typing import Any

from cssgraph.errors import InputError
from cssgraph.model.graph import Definition, GraphOutput, Reference
from cssgraph.model.span import Span
from cssgraph.model.unit import UNIT_TYPE, SourceUnit

# Offsets written for a token whose position could not be found.
MISSING_OFFSET = -1


def _offsets(span: Span | None) -> tuple[int, int]:
    if span is None:
        return MISSING_OFFSET, MISSING_OFFSET
    return span.start, span.end


def _def_start(start: int) -> int:
    # Consumers treat a definition starting at byte 0 as "no highlight".
    return 1 if start == 0 else start


# ---------------------------------------------------------------------------
# Graph output
# ---------------------------------------------------------------------------


def definition_to_dict(definition: Definition) -> dict[str, Any]:
    start, end = _offsets(definition.span)
    return {
        "unitType": definition.unit_type,
        "unit": definition.unit,
        "path": definition.path,
        "name": definition.name,
        "file": definition.file,
        "defStart": _def_start(start),
        "defEnd": end,
        "data": {"keyword": definition.data.keyword, "kind": definition.data.kind},
    }


def reference_to_dict(ref: Reference) -> dict[str, Any]:
    start, end = _offsets(ref.span)
    if ref.is_def:
        start = _def_start(start)
    return {
        "defUnitType": ref.def_unit_type,
        "defUnit": ref.def_unit,
        "defPath": ref.def_path,
        "unit": ref.unit,
        "file": ref.file,
        "start": start,
        "end": end,
        "def": ref.is_def,
    }


def output_to_dict(out: GraphOutput) -> dict[str, Any]:
    return {
        "defs": [definition_to_dict(d) for d in out.defs],
        "refs": [reference_to_dict(r) for r in out.refs],
    }


# ---------------------------------------------------------------------------
# Source units
# ---------------------------------------------------------------------------


def unit_to_dict(unit: SourceUnit) -> dict[str, Any]:
    return {"name": unit.name, "type": unit.type, "dir": unit.dir, "files": list(unit.files)}


def unit_from_dict(data: Any) -> SourceUnit:
    """Build a SourceUnit from its JSON object form."""
    if not isinstance(data, dict):
        raise InputError(f"source unit must be a JSON object, got {type(data).__name__}")
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise InputError("source unit is missing a 'name'")
    files = data.get("files") or []
    if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
        raise InputError(f"source unit {name!r}: 'files' must be a list of strings")
    return SourceUnit(
        name=name,
        type=data.get("type") or UNIT_TYPE,
        dir=data.get("dir") or ".",
        files=files,
    )


def load_json(text: str, source: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputError(f"malformed JSON input: {exc}", source=source) from exc


def units_from_json(text: str) -> list[SourceUnit]:
    """Parse build-graph input: a single unit object or a list of units."""
    data = load_json(text, source="units")
    if isinstance(data, list):
        return [unit_from_dict(item) for item in data]
    return [unit_from_dict(data)]
