"""Create shortcut files for resolved paths."""

import logging
from collections.abc import Callable
from pathlib import Path

from tagmeta.actions.base import Action
from tagmeta.integrations.shortcuts import ShortcutError, create_shortcut
from tagmeta.models.errors import operation_failed
from tagmeta.models.records import AcceptedFile, ItemOutcome, ShortcutRecord

logger = logging.getLogger(__name__)

SHORTCUT_OPERATION = "Create shortcut to file."

SHORTCUT_EXTENSION = ".lnk"

# (target, operation) -> proceed?
Confirmer = Callable[[str, str], bool]

ShortcutWriter = Callable[[str, str, Path], Path]


class OutputDirectoryNotFoundError(FileNotFoundError):
    """Raised when the shortcut output directory does not exist."""


def always_confirm(target: str, operation: str) -> bool:
    """Confirmer that approves every operation."""
    return True


class CreateShortcutAction(Action):
    """Creates a ``<name>.lnk`` shortcut in an output directory per file.

    Every shortcut is gated by a confirmation callback. A declined
    confirmation skips the file without side effects.

    Args:
        output_dir: Existing directory that receives the shortcut files.
        confirm: Callback deciding whether to proceed for a target.
        writer: Function creating a shortcut (target, description, destination).
            Defaults to the Windows Script Host writer.
    """

    def __init__(
        self,
        output_dir: Path,
        confirm: Confirmer = always_confirm,
        writer: ShortcutWriter | None = None,
    ) -> None:
        self._output_dir = output_dir
        self._confirm = confirm
        self._writer = writer or create_shortcut

    @property
    def name(self) -> str:
        return "create-shortcut"

    def begin(self) -> None:
        """Verify the output directory exists.

        Raises:
            OutputDirectoryNotFoundError: If the output directory is missing.
        """
        if not self._output_dir.is_dir():
            msg = f"Directory {self._output_dir} does not exist."
            raise OutputDirectoryNotFoundError(msg)

    def shortcut_path(self, file: AcceptedFile) -> Path:
        """Return the shortcut path created for a file."""
        return self._output_dir / f"{file.name}{SHORTCUT_EXTENSION}"

    def run(self, file: AcceptedFile) -> ItemOutcome | None:
        logger.debug("Processing %s", file.full_name)

        if not self._confirm(file.full_name, SHORTCUT_OPERATION):
            logger.debug("Skipped %s: not confirmed", file.full_name)
            return None

        destination = self.shortcut_path(file)
        try:
            created = self._writer(file.full_name, file.name, destination)
        except (ShortcutError, OSError) as e:
            logger.debug("Creating shortcut for %s failed: %s", file.full_name, e)
            return ItemOutcome.fail(operation_failed("ShortcutFailed", file.full_name, e))

        return ItemOutcome.ok(ShortcutRecord(file=AcceptedFile(path=created), target=file))
