"""Unit tests for CLI logging setup."""

import io
import logging
from unittest.mock import patch

from tagmeta.core.log import PACKAGE_LOGGER, configure_logging, resolve_level


class TestResolveLevel:
    """Tests for resolve_level function."""

    def test_default(self) -> None:
        """Warnings and errors are shown by default."""
        assert resolve_level() == logging.WARNING

    def test_verbose(self) -> None:
        """--verbose shows debug traces."""
        assert resolve_level(verbose=True) == logging.DEBUG

    def test_quiet(self) -> None:
        """--quiet shows errors only."""
        assert resolve_level(quiet=True) == logging.ERROR

    def test_verbose_wins(self) -> None:
        """--verbose takes precedence over --quiet."""
        assert resolve_level(verbose=True, quiet=True) == logging.DEBUG


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_verbose_prefix(self) -> None:
        """Debug records are prefixed with VERBOSE."""
        stream = io.StringIO()
        with patch("sys.stderr", stream):
            configure_logging(verbose=True)

        logging.getLogger("tagmeta.actions.read_tags").debug("Extension: %s", ".png")

        assert "VERBOSE: Extension: .png" in stream.getvalue()

    def test_default_hides_debug(self) -> None:
        """Debug records are hidden without --verbose."""
        stream = io.StringIO()
        with patch("sys.stderr", stream):
            configure_logging()

        logger = logging.getLogger("tagmeta.core.processor")
        logger.debug("hidden")
        logger.warning("shown")

        assert "hidden" not in stream.getvalue()
        assert "WARNING: shown" in stream.getvalue()

    def test_repeated_calls_replace_handler(self) -> None:
        """Calling twice leaves a single CLI handler."""
        configure_logging()
        logger = configure_logging(verbose=True)

        assert logger is logging.getLogger(PACKAGE_LOGGER)
        names = [h.get_name() for h in logger.handlers]
        assert names.count("tagmeta-cli") == 1
        assert logger.level == logging.DEBUG
