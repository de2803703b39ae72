"""CLI command: cssgraph build-graph -- graph one source unit."""

from __future__ import annotations

import json
import sys

import click

from cssgraph.errors import InputError
from cssgraph.graph import build_graph as run_build_graph
from cssgraph.serialize import output_to_dict, units_from_json


@click.command("build-graph")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    show_default=True,
    help="Directory unit paths are relative to.",
)
@click.option("--indent", type=int, default=None, help="Pretty-print the output JSON.")
def build_graph(root: str, indent: int | None) -> None:
    """Graph a source unit read from stdin.

    Accepts one unit object, or a list holding exactly one unit, and prints
    {"defs": [...], "refs": [...]}. Exits with code 1 on malformed input or
    when more than one unit is given.
    """
    raw = click.get_text_stream("stdin").read()
    try:
        units = units_from_json(raw)
        out = run_build_graph(units, root=root)
    except InputError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps(output_to_dict(out), indent=indent))
