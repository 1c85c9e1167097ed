"""Utility modules for tagmeta.

This module exports commonly used utility functions.
"""

from tagmeta.utils.formatting import (
    console,
    err_console,
    print_error,
    print_reported_error,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_reported_error",
    "print_success",
    "print_warning",
]
