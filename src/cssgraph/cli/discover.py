"""CLI command: cssgraph discover -- list the CSS and HTML files of a tree."""

from __future__ import annotations

import json
import sys

import click

from cssgraph.config import GraphConfig
from cssgraph.errors import InputError
from cssgraph.scan import discover as discover_unit
from cssgraph.serialize import load_json, unit_to_dict


@click.command()
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    show_default=True,
    help="Directory to scan.",
)
def discover(root: str) -> None:
    """Scan a directory tree for CSS and HTML files.

    Reads an optional JSON configuration object from stdin and prints a
    JSON list holding the single source unit found.
    """
    raw = click.get_text_stream("stdin").read()
    try:
        config = GraphConfig.from_mapping(load_json(raw, source="config") if raw.strip() else None)
    except InputError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    unit = discover_unit(root, config)
    click.echo(json.dumps([unit_to_dict(unit)], indent=2))
