"""Utility modules for snapman.

This module exports commonly used utility functions.
"""

from snapman.utils.formatting import console, err_console, print_error, print_info, print_success
from snapman.utils.shell import CommandResult, command_exists, is_root, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "is_root",
    "print_error",
    "print_info",
    "print_success",
    "run_command",
]
