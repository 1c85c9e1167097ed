"""CLI commands for tagmeta.

This package contains all subcommand implementations.
"""

from tagmeta.cli.commands import config, shortcut, tags

__all__ = ["config", "shortcut", "tags"]
