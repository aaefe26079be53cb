"""Utility modules for mdprune.

This module exports commonly used utility functions.
"""

from mdprune.utils.formatting import (
    console,
    display_relative_path,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "display_relative_path",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
