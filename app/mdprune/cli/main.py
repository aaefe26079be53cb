"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from mdprune import __version__
from mdprune.cli.commands import prune, scan
from mdprune.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="md-prune-image",
    help="Remove orphaned image files from markdown directories.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"md-prune-image version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich.

    Warnings and above are shown by default; --verbose shows debug output.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


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
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file (default: ~/.config/mdprune/config.toml).",
        ),
    ] = None,
) -> None:
    """md-prune-image - Remove orphaned images from markdown directories.

    An image is orphaned when no markdown file in the scanned directory
    references it through ![alt](path) or <img src="path">.
    """
    configure_logging(verbose and not quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config"] = config


# Register commands
app.command(name="scan")(scan.scan_orphans)
app.command(name="prune")(prune.prune_orphans)


if __name__ == "__main__":
    app()
