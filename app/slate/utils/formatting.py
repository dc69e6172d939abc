"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from slate.core.theme import get_theme

if TYPE_CHECKING:
    from slate.vault.models import FileEntry


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_files_table(title: str = "Vault Files") -> Table:
    """Create a pre-configured table for displaying vault files.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for file display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    table.add_column("Name", no_wrap=True)
    table.add_column("Relative Path", overflow="fold")
    return table


def format_file_row(entry: FileEntry) -> tuple[str, str]:
    """Format a vault file as a table row with proper styling.

    File names and paths are escaped so brackets in note titles are not
    interpreted as Rich markup.

    Args:
        entry: The file entry to format.

    Returns:
        Tuple of (name, relative_path) with Rich markup.
    """
    name = f"[note_name]{escape(entry.name or '-')}[/]"
    relative = f"[note_path]{escape(entry.relative_path)}[/]"
    return (name, relative)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
