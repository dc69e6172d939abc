"""Path command implementation.

Prints the absolute vault root a home-relative vault path resolves to.
"""

from typing import Annotated

import typer

from slate.cli.commands.common import load_config_or_exit, resolve_vault_arg
from slate.utils.formatting import print_error, print_warning
from slate.vault.scanner import VaultError, VaultScanner, path_exists


def path(
    vault: Annotated[
        str | None,
        typer.Argument(help="Vault path relative to your home directory."),
    ] = None,
) -> None:
    """Print the absolute path of a vault."""
    config = load_config_or_exit()
    vault_path = resolve_vault_arg(vault, config)

    try:
        vault_root = VaultScanner().resolve_root(vault_path)
    except VaultError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    # Plain echo so the path is never wrapped or styled
    typer.echo(str(vault_root))

    if not path_exists(vault_root):
        print_warning("Vault path does not exist yet.")
