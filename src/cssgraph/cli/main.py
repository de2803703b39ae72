"""cssgraph CLI entry point: Click group with subcommands."""

import logging

import click

from cssgraph import __version__

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@click.group()
@click.version_option(version=__version__, prog_name="cssgraph")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.option("-q", "--quiet", is_flag=True, help="Only log errors to stderr.")
def cli(verbose: bool, quiet: bool) -> None:
    """cssgraph - cross-reference CSS selectors, HTML usages and property docs.

    Requests are read as JSON from stdin and results written as JSON to
    stdout; diagnostics go to stderr.
    """
    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format=_LOG_FORMAT, force=True)


# Import and register subcommands
from cssgraph.cli.discover import discover  # noqa: E402
from cssgraph.cli.graph import build_graph  # noqa: E402

cli.add_command(discover)
cli.add_command(build_graph)
