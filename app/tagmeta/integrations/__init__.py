"""Integrations with external libraries and platform APIs.

This module wraps the tag reader (Pillow) and the shortcut writer
(Windows Script Host via pywin32) behind plain functions.
"""

from tagmeta.integrations.shortcuts import ShortcutError, create_shortcut, is_supported
from tagmeta.integrations.tags import TagReadError, read_keywords

__all__ = [
    "ShortcutError",
    "TagReadError",
    "create_shortcut",
    "is_supported",
    "read_keywords",
]
