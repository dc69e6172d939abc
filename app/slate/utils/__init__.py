"""Utility modules for slate.

This module exports commonly used utility functions.
"""

from slate.utils.formatting import (
    console,
    create_files_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_files_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
