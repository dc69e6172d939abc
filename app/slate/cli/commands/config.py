"""Config commands.

Shows and edits the persistent settings in ~/.config/slate/config.toml.
"""

from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from slate.cli.commands.common import load_config_or_exit
from slate.core.config import ConfigError, SlateConfig, save_config
from slate.core.paths import get_config_path
from slate.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="Show and edit slate configuration.",
    no_args_is_help=True,
)


def _save_or_exit(config: SlateConfig) -> None:
    """Persist the config, exiting with code 1 on failure."""
    try:
        saved_path = save_config(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_success(f"Configuration saved to {saved_path}")


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config = load_config_or_exit()

    table = Table(
        title="slate configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value")

    vault = escape(config.vault_path) if config.vault_path else "[muted](not set)[/]"
    table.add_row("vault_path", vault)
    table.add_row("extension", config.extension)
    table.add_row("log_level", config.effective_log_level)

    console.print(table)


@app.command("path")
def config_path() -> None:
    """Print the location of the config file."""
    typer.echo(str(get_config_path()))


@app.command("set-vault")
def set_vault(
    vault: Annotated[
        str,
        typer.Argument(help="Vault path relative to your home directory."),
    ],
) -> None:
    """Set the default vault used when no vault is given."""
    config = load_config_or_exit()
    _save_or_exit(config.model_copy(update={"vault_path": vault}))


@app.command("set-extension")
def set_extension(
    extension: Annotated[
        str,
        typer.Argument(help="File extension to match, e.g. md."),
    ],
) -> None:
    """Set the file extension matched by scans."""
    config = load_config_or_exit()
    try:
        updated = SlateConfig.model_validate({**config.model_dump(), "extension": extension})
    except ValidationError as e:
        print_error(f"Invalid extension: {extension}")
        raise typer.Exit(code=1) from e
    _save_or_exit(updated)
