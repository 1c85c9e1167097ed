"""Logging setup for the command-line interface.

Library modules only create loggers with ``logging.getLogger(__name__)``;
the CLI attaches a single stderr handler to the package logger.
"""

import logging
import sys

PACKAGE_LOGGER = "tagmeta"

_HANDLER_NAME = "tagmeta-cli"


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI flags to a log level.

    Args:
        verbose: Show diagnostic traces.
        quiet: Show errors only.

    Returns:
        DEBUG when verbose, ERROR when quiet, WARNING otherwise.
        Verbose wins if both are set.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the package logger for CLI use.

    Safe to call repeatedly; each call replaces the handler so it
    writes to the current sys.stderr.

    Args:
        verbose: Show diagnostic traces (``VERBOSE:`` lines).
        quiet: Show errors only.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = resolve_level(verbose, quiet)

    for existing in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(_LevelPrefixFormatter())
    handler.setLevel(level)
    logger.addHandler(handler)

    logger.setLevel(level)
    return logger


class _LevelPrefixFormatter(logging.Formatter):
    """Prefix debug records with ``VERBOSE:`` and others with their level."""

    def format(self, record: logging.LogRecord) -> str:
        prefix = "VERBOSE" if record.levelno <= logging.DEBUG else record.levelname
        message = f"{prefix}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message
