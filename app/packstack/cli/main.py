"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from packstack import __version__
from packstack.cli.commands import catalog, command, config, generate
from packstack.utils.log import setup_logging

# Create main Typer app
app = typer.Typer(
    name="packstack",
    help="Generate idempotent installation scripts for your applications.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"packstack version {__version__}")
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
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """packstack - Installation scripts for Windows, macOS and Linux.

    Pick applications from the curated catalog (or a discovered-packages
    file) and get one script that installs them all, skipping anything
    already installed.
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


# Register commands
app.command("generate")(generate.generate)
app.command("command")(command.command)
app.command("catalog")(catalog.list_catalog)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
