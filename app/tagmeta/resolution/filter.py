"""Filesystem membership check for expanded arguments."""

import logging

from tagmeta.models.errors import ErrorCategory, ReportedError
from tagmeta.resolution.expander import Expansion
from tagmeta.resolution.providers import FileSystemProvider, NamespaceProvider

logger = logging.getLogger(__name__)


class FilesystemFilter:
    """Rejects expansions that do not live on the filesystem provider.

    The check runs once per argument against the expansion's provider,
    since an expansion never spans providers.
    """

    def is_filesystem_provider(self, provider: NamespaceProvider) -> bool:
        """Check if a provider implements the local filesystem."""
        return isinstance(provider, FileSystemProvider)

    def check(self, expansion: Expansion) -> ReportedError | None:
        """Check an expansion and build an error when it is rejected.

        Args:
            expansion: Expansion of a single argument.

        Returns:
            None if the expansion is on the filesystem, otherwise an
            InvalidProvider error targeted at the original argument.
        """
        if self.is_filesystem_provider(expansion.provider):
            return None

        logger.debug(
            "Rejecting %s: provider %s is not the filesystem",
            expansion.argument,
            expansion.provider.name,
        )
        return ReportedError(
            category=ErrorCategory.INVALID_PROVIDER,
            error_id="InvalidProvider",
            message=(
                f"{expansion.argument} does not resolve to a path on the FileSystem provider."
            ),
            target=expansion.argument,
            cause=ValueError(expansion.argument),
        )
