"""Config command implementation.

Shows and initializes the user configuration file.
"""

from pathlib import Path
from typing import Annotated

import typer

from packstack.cli.types import require_config
from packstack.core.config import ConfigError, PackstackConfig, save_config
from packstack.core.detect import detect_platform
from packstack.core.paths import get_config_path
from packstack.models.platform import Platform
from packstack.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the packstack configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config = require_config()
    config_path = get_config_path()

    if config_path.exists():
        console.print(f"[muted]Config file: {config_path}[/]")
    else:
        console.print(f"[muted]Config file: {config_path} (not created, using defaults)[/]")

    platform = (
        config.default_platform.value
        if config.default_platform is not None
        else f"(detect: {detect_platform().value})"
    )
    output_dir = str(config.output_dir) if config.output_dir is not None else "(current directory)"
    catalog = str(config.catalog_path) if config.catalog_path is not None else "(bundled)"

    console.print(f"default_platform = {platform}")
    console.print(f"output_dir       = {output_dir}")
    console.print(f"catalog_path     = {catalog}")


@app.command()
def init(
    platform: Annotated[
        Platform | None,
        typer.Option(
            "--platform",
            "-p",
            help="Default target platform (omit to detect at run time).",
            case_sensitive=False,
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Directory scripts are written to."),
    ] = None,
    catalog_path: Annotated[
        Path | None,
        typer.Option("--catalog", help="Curated catalog TOML file."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Create the configuration file."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_error(f"Config already exists: {config_path}")
        print_info("Use --force to overwrite.")
        raise typer.Exit(code=1)

    config = PackstackConfig(
        default_platform=platform,
        output_dir=output_dir,
        catalog_path=catalog_path,
    )
    try:
        saved = save_config(config, config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")


@app.command()
def path() -> None:
    """Print the configuration file path."""
    typer.echo(str(get_config_path()))
