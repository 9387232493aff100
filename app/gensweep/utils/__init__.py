"""Utility modules for gensweep.

This module exports commonly used utility functions.
"""

from gensweep.utils.formatting import (
    console,
    create_path_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_path_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
