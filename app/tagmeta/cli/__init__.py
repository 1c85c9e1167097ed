"""CLI package for tagmeta.

This package contains the Typer application and all subcommands.
"""

from tagmeta.cli.main import app

__all__ = ["app"]
