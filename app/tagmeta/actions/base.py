"""Abstract base class for per-file actions.

This module defines the Action interface that every command plugs into
the item processor.
"""

from abc import ABC, abstractmethod

from tagmeta.models.records import AcceptedFile, ItemOutcome


class ActionAbortedError(Exception):
    """Raised by an action to abandon the rest of the batch."""


class Action(ABC):
    """Abstract base class for all per-file actions.

    Actions receive one accepted file at a time and return an outcome
    carrying either a record or a reported error. Returning None means
    the file was skipped without a result or an error.

    Example:
        >>> action = ReadTagAction()
        >>> outcome = action.run(AcceptedFile.from_string("/photos/a.jpg"))
        >>> if outcome is not None and outcome.success:
        ...     print(outcome.record.keywords)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a short name used in diagnostics."""

    def begin(self) -> None:
        """Check preconditions before any argument is processed.

        Raises:
            Exception: Any exception aborts the whole invocation.
        """

    @abstractmethod
    def run(self, file: AcceptedFile) -> ItemOutcome | None:
        """Run the action on a single file.

        Args:
            file: File accepted by the filesystem filter.

        Returns:
            ItemOutcome with a record or error, or None if the file was skipped.

        Raises:
            ActionAbortedError: To stop processing before the next file.
        """
