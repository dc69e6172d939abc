"""CLI commands for slate.

This package contains all subcommand implementations.
"""

from slate.cli.commands import config, path, scan

__all__ = ["config", "path", "scan"]
