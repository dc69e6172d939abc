"""Scan command implementation.

Lists the notes in a vault, either as a table or as JSON in the same
shape the front end receives.
"""

import json
import time
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from slate.cli.commands.common import load_config_or_exit, resolve_vault_arg
from slate.utils.formatting import (
    console,
    create_files_table,
    format_file_row,
    print_error,
    print_info,
)
from slate.vault.models import VaultScanResult
from slate.vault.scanner import VaultError, VaultScanner


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def scan(
    vault: Annotated[
        str | None,
        typer.Argument(help="Vault path relative to your home directory."),
    ] = None,
    extension: Annotated[
        str | None,
        typer.Option(
            "--ext",
            "-x",
            help="File extension to match (default from config, usually md).",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-l",
            help="Limit number of files to display.",
        ),
    ] = None,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export scan results to JSON file.",
        ),
    ] = None,
) -> None:
    """Scan a vault and list its notes.

    Hidden files and directories are skipped. Files are listed in
    relative-path order.

    Examples:
        slate scan Notes                    # Scan ~/Notes
        slate scan                          # Scan the configured default vault
        slate scan Notes --ext txt          # Match .txt instead of .md
        slate scan Notes --format json      # Output as JSON
        slate scan Notes --export scan.json # Export to JSON file
    """
    config = load_config_or_exit()
    vault_path = resolve_vault_arg(vault, config)

    try:
        scanner = VaultScanner(extension or config.extension)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    start = time.perf_counter()
    try:
        files = scanner.scan(vault_path)
        vault_root = scanner.resolve_root(vault_path)
    except VaultError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    elapsed_ms = (time.perf_counter() - start) * 1000

    # Handle export (always JSON, always the full result)
    if export_path is not None:
        export_path = export_path.resolve()
        if export_path.is_dir():
            print_error(f"Export path is a directory: {export_path}")
            raise typer.Exit(code=1)

        scan_result = VaultScanResult.create(
            files=files,
            vault_root=str(vault_root),
            extension=scanner.extension,
            elapsed_ms=elapsed_ms,
        )
        try:
            export_path.parent.mkdir(parents=True, exist_ok=True)
            export_path.write_text(json.dumps(scan_result.to_dict(), indent=2))
            print_info(f"Scan results exported to {export_path}")
        except OSError as e:
            print_error(f"Failed to export: {e}")
            raise typer.Exit(code=1) from e

    display_files = files[:limit] if limit else files

    if output_format == OutputFormat.JSON:
        scan_result = VaultScanResult.create(
            files=display_files,
            vault_root=str(vault_root),
            extension=scanner.extension,
            elapsed_ms=elapsed_ms,
        )
        console.print_json(json.dumps(scan_result.to_dict()))
        return

    if not files:
        print_info(f"No .{scanner.extension} files found in {vault_root}")
        return

    table = create_files_table(f"Vault Files ({vault_path})")
    for entry in display_files:
        table.add_row(*format_file_row(entry))

    console.print(table)

    summary = f"Showing {len(display_files)} of {len(files)} files ({elapsed_ms:.2f}ms)"
    if limit and len(display_files) < len(files):
        summary += f" (limited to {limit})"
    console.print(f"\n[dim]{summary}[/]")
