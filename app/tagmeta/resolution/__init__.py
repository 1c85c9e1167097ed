"""Path resolution module.

This module provides namespace providers, wildcard and literal path
expansion, and the filesystem membership check shared by all commands.
"""

from tagmeta.resolution.errors import (
    DriveNotFoundError,
    ItemNotFoundError,
    ProviderNotFoundError,
    ResolutionError,
)
from tagmeta.resolution.expander import Expansion, ExpansionMode, PathExpander, ResolvedPath
from tagmeta.resolution.filter import FilesystemFilter
from tagmeta.resolution.providers import (
    EnvironmentProvider,
    FileSystemProvider,
    NamespaceProvider,
    ProviderRegistry,
    has_wildcards,
)

__all__ = [
    "DriveNotFoundError",
    "EnvironmentProvider",
    "Expansion",
    "ExpansionMode",
    "FileSystemProvider",
    "FilesystemFilter",
    "ItemNotFoundError",
    "NamespaceProvider",
    "PathExpander",
    "ProviderNotFoundError",
    "ProviderRegistry",
    "ResolutionError",
    "ResolvedPath",
    "has_wildcards",
]
