"""CLI package for slate.

This package contains the Typer application and all subcommands.
"""

from slate.cli.main import app

__all__ = ["app"]
