"""Utility modules for packstack.

This module exports commonly used utility functions.
"""

from packstack.utils.formatting import (
    console,
    create_package_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_package_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
