"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from slate import __version__
from slate.cli.commands import config, path, scan
from slate.core.config import ConfigError, load_config
from slate.core.logs import configure_logging

# Create main Typer app
app = typer.Typer(
    name="slate",
    help="Markdown vault scanner.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"slate version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """slate - Markdown vault scanner.

    Finds the notes in a vault under your home directory, skipping
    hidden files and directories.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    # Commands report config errors themselves; logging just falls back
    try:
        level = load_config().effective_log_level
    except ConfigError:
        level = "WARNING"
    configure_logging(level, verbose=verbose, quiet=quiet)


# Register commands
app.command(name="scan")(scan.scan)
app.command(name="path")(path.path)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
