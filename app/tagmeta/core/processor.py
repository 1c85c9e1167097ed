"""Per-invocation item processing.

Drives one batch of path arguments through expansion, the filesystem
filter and an action, streaming one outcome per accepted file or per
reported error. Nothing is retained between invocations.
"""

import logging
from collections.abc import Iterable, Iterator

from tagmeta.actions.base import Action, ActionAbortedError
from tagmeta.models.errors import operation_failed
from tagmeta.models.records import AcceptedFile, ItemOutcome
from tagmeta.resolution.errors import ResolutionError
from tagmeta.resolution.expander import ExpansionMode, PathExpander
from tagmeta.resolution.filter import FilesystemFilter

logger = logging.getLogger(__name__)


class ItemProcessor:
    """Runs an action over every file a batch of arguments resolves to.

    Failures never stop the batch: resolution errors, rejected providers
    and action failures are each yielded as an error outcome attributed
    to the argument or file that caused them. Only ActionAbortedError
    propagates, ending the iteration.

    Args:
        action: Action invoked for each accepted file.
        expander: Path expander. Defaults to the standard providers.
        fs_filter: Filesystem membership check.

    Example:
        >>> processor = ItemProcessor(ReadTagAction())
        >>> for outcome in processor.process(["*.jpg"], ExpansionMode.WILDCARD):
        ...     print(outcome.record or outcome.error)
    """

    def __init__(
        self,
        action: Action,
        expander: PathExpander | None = None,
        fs_filter: FilesystemFilter | None = None,
    ) -> None:
        self._action = action
        self._expander = expander or PathExpander()
        self._filter = fs_filter or FilesystemFilter()

    def process(self, arguments: Iterable[str], mode: ExpansionMode) -> Iterator[ItemOutcome]:
        """Process a batch of path arguments.

        The action's preconditions are checked immediately, before any
        argument is touched. Outcomes are then produced lazily, in argument
        order and resolved-path order within each argument.

        Args:
            arguments: Raw path arguments.
            mode: Expansion mode shared by the whole batch.

        Returns:
            Iterator of outcomes.

        Raises:
            Exception: Whatever the action's begin() raises; nothing has
                been processed at that point.
        """
        self._action.begin()
        logger.debug("Begin %s (%s paths)", self._action.name, mode.value)
        return self._iter_outcomes(arguments, mode)

    def _iter_outcomes(self, arguments: Iterable[str], mode: ExpansionMode) -> Iterator[ItemOutcome]:
        for argument in arguments:
            yield from self._process_argument(argument, mode)
        logger.debug("End %s", self._action.name)

    def _process_argument(self, argument: str, mode: ExpansionMode) -> Iterator[ItemOutcome]:
        """Expand, filter and act on a single argument."""
        try:
            expansion = self._expander.expand(argument, mode)
        except ResolutionError as e:
            logger.debug("Could not resolve %s: %s", argument, e)
            yield ItemOutcome.fail(e.to_reported())
            return

        rejected = self._filter.check(expansion)
        if rejected is not None:
            yield ItemOutcome.fail(rejected)
            return

        for resolved in expansion.paths:
            file = AcceptedFile.from_string(resolved.path)
            outcome = self._run_action(file)
            if outcome is not None:
                yield outcome

    def _run_action(self, file: AcceptedFile) -> ItemOutcome | None:
        """Run the action, turning unexpected exceptions into error outcomes."""
        try:
            return self._action.run(file)
        except ActionAbortedError:
            logger.debug("%s aborted at %s", self._action.name, file.full_name)
            raise
        except Exception as e:
            logger.debug("%s failed on %s", self._action.name, file.full_name, exc_info=True)
            return ItemOutcome.fail(operation_failed("Error", file.full_name, e))
