"""Namespace providers for path resolution.

A provider owns one namespace that paths can point into. The local
filesystem is one provider; the process environment is another, exposed
through the ``Env:`` drive. Arguments select a provider either with the
``Provider::path`` form or with a named ``drive:path`` prefix; anything
else is a filesystem path.
"""

import fnmatch
import glob
import logging
import os
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable

from tagmeta.resolution.errors import (
    DriveNotFoundError,
    ItemNotFoundError,
    ProviderNotFoundError,
)

logger = logging.getLogger(__name__)

_WILDCARD_CHARS = re.compile(r"[*?\[]")

_SEPARATORS = "/\\"

# "FileSystem::/tmp/a.png", "Environment::HOME"
_PROVIDER_QUALIFIED = re.compile(r"^(?P<provider>[A-Za-z][\w.]*)::(?P<path>.*)$", re.DOTALL)

# "Env:HOME". Single letters ("C:") are Windows drives on the filesystem.
_DRIVE_QUALIFIED = re.compile(r"^(?P<drive>[A-Za-z]\w+):(?P<path>.*)$", re.DOTALL)


def has_wildcards(path: str) -> bool:
    """Check if a path contains glob metacharacters.

    Args:
        path: Path or pattern to check.

    Returns:
        True if the path contains ``*``, ``?`` or ``[``.
    """
    return _WILDCARD_CHARS.search(path) is not None


class NamespaceProvider(ABC):
    """Abstract base class for all namespace providers.

    Providers expand wildcard patterns against their namespace and
    construct literal paths without touching it.

    Example:
        >>> provider = FileSystemProvider()
        >>> provider.expand("*.png")
        ['/home/user/a.png', '/home/user/b.png']
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the provider name used in ``Provider::path`` arguments."""

    @property
    def drives(self) -> tuple[str, ...]:
        """Return the drive names this provider serves."""
        return ()

    @abstractmethod
    def expand(self, pattern: str) -> list[str]:
        """Resolve a pattern to existing paths, interpreting wildcards.

        Args:
            pattern: Provider-relative path, possibly containing wildcards.

        Returns:
            Non-empty list of provider paths, sorted.

        Raises:
            ItemNotFoundError: If nothing matches.
        """

    @abstractmethod
    def make_path(self, path: str) -> str:
        """Construct a provider path without interpreting wildcards.

        The path does not need to exist.

        Args:
            path: Provider-relative path.

        Returns:
            Provider path.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FileSystemProvider(NamespaceProvider):
    """Provider for the local filesystem.

    Paths are made absolute against the current working directory,
    ``~`` is expanded and the result is normalized.
    """

    @property
    def name(self) -> str:
        return "FileSystem"

    def make_path(self, path: str) -> str:
        return os.path.normpath(os.path.abspath(os.path.expanduser(path)))

    def expand(self, pattern: str) -> list[str]:
        path = self.make_path(pattern)

        if has_wildcards(pattern):
            matches = sorted(glob.glob(path))
            logger.debug("Pattern %s matched %d path(s)", pattern, len(matches))
            if not matches:
                raise ItemNotFoundError(pattern)
            return matches

        if not os.path.lexists(path):
            raise ItemNotFoundError(pattern)
        return [path]


class EnvironmentProvider(NamespaceProvider):
    """Provider for process environment variables, served as ``Env:``."""

    @property
    def name(self) -> str:
        return "Environment"

    @property
    def drives(self) -> tuple[str, ...]:
        return ("Env",)

    def make_path(self, path: str) -> str:
        return f"Env:{path.strip(_SEPARATORS)}"

    def expand(self, pattern: str) -> list[str]:
        variable = pattern.strip(_SEPARATORS)

        if not variable:
            return [self.make_path("")]

        if has_wildcards(variable):
            matches = sorted(key for key in os.environ if fnmatch.fnmatch(key, variable))
        elif variable in os.environ:
            matches = [variable]
        else:
            matches = []

        if not matches:
            raise ItemNotFoundError(pattern)
        return [self.make_path(key) for key in matches]


def default_providers() -> list[NamespaceProvider]:
    """Create the providers available to every invocation.

    Returns:
        List with the filesystem and environment providers.
    """
    return [FileSystemProvider(), EnvironmentProvider()]


class ProviderRegistry:
    """Looks up providers by name and by drive.

    Args:
        providers: Providers to register. Defaults to default_providers().
            Exactly one FileSystemProvider must be present.
    """

    def __init__(self, providers: Iterable[NamespaceProvider] | None = None) -> None:
        self._providers: dict[str, NamespaceProvider] = {}
        self._drives: dict[str, NamespaceProvider] = {}
        self._filesystem: FileSystemProvider | None = None

        for provider in default_providers() if providers is None else providers:
            self.register(provider)

        if self._filesystem is None:
            msg = "A FileSystemProvider must be registered"
            raise ValueError(msg)

    @property
    def filesystem(self) -> FileSystemProvider:
        """Return the registered filesystem provider."""
        assert self._filesystem is not None
        return self._filesystem

    def register(self, provider: NamespaceProvider) -> None:
        """Register a provider and its drives.

        Args:
            provider: Provider to register. Names are case-insensitive.
        """
        self._providers[provider.name.lower()] = provider
        for drive in provider.drives:
            self._drives[drive.lower()] = provider
        if isinstance(provider, FileSystemProvider):
            self._filesystem = provider

    def split(self, argument: str) -> tuple[NamespaceProvider, str]:
        """Split an argument into its provider and provider-relative path.

        Args:
            argument: Raw path argument.

        Returns:
            Tuple of (provider, provider-relative path).

        Raises:
            ProviderNotFoundError: If a ``Provider::`` prefix names no provider.
            DriveNotFoundError: If a ``drive:`` prefix names no drive.
        """
        match = _PROVIDER_QUALIFIED.match(argument)
        if match:
            provider = self._providers.get(match.group("provider").lower())
            if provider is None:
                raise ProviderNotFoundError(argument, match.group("provider"))
            return provider, match.group("path")

        match = _DRIVE_QUALIFIED.match(argument)
        if match:
            provider = self._drives.get(match.group("drive").lower())
            if provider is None:
                raise DriveNotFoundError(argument, match.group("drive"))
            return provider, match.group("path")

        return self.filesystem, argument
