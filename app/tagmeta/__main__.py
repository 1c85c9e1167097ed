"""Allow running tagmeta with ``python -m tagmeta``."""

from tagmeta.cli.main import app

app()
