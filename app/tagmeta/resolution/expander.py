"""Path argument expansion.

Turns one raw path argument into the provider paths it stands for,
either expanding wildcards against the namespace or constructing a
single literal path.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from tagmeta.resolution.providers import NamespaceProvider, ProviderRegistry

logger = logging.getLogger(__name__)


class ExpansionMode(str, Enum):
    """How path arguments of one invocation are interpreted.

    Attributes:
        WILDCARD: Expand glob characters; resolved paths must exist.
        LITERAL: Take the path as-is; it does not need to exist.
    """

    WILDCARD = "wildcard"
    LITERAL = "literal"


@dataclass(frozen=True, slots=True)
class ResolvedPath:
    """A concrete provider path produced by expansion.

    Attributes:
        path: Provider path (absolute filesystem path for the filesystem).
        provider: Provider that produced the path.
    """

    path: str
    provider: NamespaceProvider


@dataclass(frozen=True, slots=True)
class Expansion:
    """All paths one argument expanded to.

    A wildcard never spans providers, so every path shares ``provider``.

    Attributes:
        argument: The original argument string.
        provider: Provider the argument resolved against.
        paths: Resolved paths, in provider order.
    """

    argument: str
    provider: NamespaceProvider
    paths: tuple[ResolvedPath, ...]


class PathExpander:
    """Expands path arguments through a provider registry.

    Args:
        registry: Registry used to pick the provider for each argument.
            Defaults to the filesystem and environment providers.
    """

    def __init__(self, registry: ProviderRegistry | None = None) -> None:
        self._registry = registry or ProviderRegistry()

    def expand(self, argument: str, mode: ExpansionMode) -> Expansion:
        """Expand one argument into resolved paths.

        Args:
            argument: Raw path argument, a pattern or a literal path.
            mode: WILDCARD to expand glob characters, LITERAL to construct
                exactly one path without checking existence.

        Returns:
            Expansion with at least one resolved path.

        Raises:
            ItemNotFoundError: If a wildcard pattern matched nothing or a
                plain path does not exist (WILDCARD mode only).
            DriveNotFoundError: If the argument names an unknown drive.
            ProviderNotFoundError: If the argument names an unknown provider.
        """
        provider, path = self._registry.split(argument)

        if mode == ExpansionMode.WILDCARD:
            resolved = provider.expand(path)
        else:
            resolved = [provider.make_path(path)]

        logger.debug(
            "Resolved %s via %s provider (%s): %s",
            argument,
            provider.name,
            mode.value,
            ", ".join(resolved),
        )
        return Expansion(
            argument=argument,
            provider=provider,
            paths=tuple(ResolvedPath(path=p, provider=provider) for p in resolved),
        )
