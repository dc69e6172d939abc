"""Shared helpers for CLI commands."""

import typer

from slate.core.config import ConfigError, SlateConfig, load_config
from slate.utils.formatting import print_error


def load_config_or_exit() -> SlateConfig:
    """Load the user configuration, exiting with code 1 if it is invalid."""
    try:
        return load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def resolve_vault_arg(vault: str | None, config: SlateConfig) -> str:
    """Pick the vault from the command line or the configured default.

    Args:
        vault: Vault path given on the command line, if any.
        config: Loaded user configuration.

    Returns:
        Vault path relative to the home directory.

    Raises:
        typer.Exit: If neither source provides a vault.
    """
    if vault is not None:
        return vault
    if config.vault_path is not None:
        return config.vault_path

    print_error("No vault given. Pass a vault path or run 'slate config set-vault <path>'.")
    raise typer.Exit(code=1)
