from cssgraph.cli.main import cli

__all__ = ["cli"]
