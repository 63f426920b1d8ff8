"""Command-line interface for idgen."""

from idgen.cli.main import cli

__all__ = ["cli"]
