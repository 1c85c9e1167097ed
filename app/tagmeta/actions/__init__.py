"""Per-file actions.

This module exports the Action interface and its two variants:
reading image keywords and creating shortcut files.
"""

from tagmeta.actions.base import Action
from tagmeta.actions.create_shortcut import (
    SHORTCUT_OPERATION,
    CreateShortcutAction,
    OutputDirectoryNotFoundError,
    always_confirm,
)
from tagmeta.actions.read_tags import SUPPORTED_FORMATS, ReadTagAction, is_supported_format

__all__ = [
    "SHORTCUT_OPERATION",
    "SUPPORTED_FORMATS",
    "Action",
    "CreateShortcutAction",
    "OutputDirectoryNotFoundError",
    "ReadTagAction",
    "always_confirm",
    "is_supported_format",
]
