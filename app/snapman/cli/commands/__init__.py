"""CLI commands for snapman.

This package contains all subcommand implementations.
"""

from snapman.cli.commands import config

__all__ = ["config"]
