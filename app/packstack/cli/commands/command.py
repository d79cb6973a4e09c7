"""Command command implementation.

Prints the raw install commands of a selection as a single shell line.
"""

from pathlib import Path
from typing import Annotated

import typer

from packstack.cli.types import (
    require_catalog,
    require_config,
    require_selection,
    resolve_platform,
)
from packstack.core.dispatcher import generate_command
from packstack.models.platform import Platform
from packstack.utils.formatting import print_warning


def command(
    ids: Annotated[
        list[str] | None,
        typer.Argument(help="Catalog ids of the packages to install."),
    ] = None,
    platform: Annotated[
        Platform | None,
        typer.Option(
            "--platform",
            "-p",
            help="Target platform (default: config, then this machine).",
            case_sensitive=False,
        ),
    ] = None,
    share: Annotated[
        str | None,
        typer.Option("--share", "-s", help="Share link or fragment with catalog ids."),
    ] = None,
    discovered: Annotated[
        Path | None,
        typer.Option("--discovered", "-d", help="JSON file of discovered packages."),
    ] = None,
    catalog_path: Annotated[
        Path | None,
        typer.Option("--catalog", help="Curated catalog TOML file."),
    ] = None,
) -> None:
    """Print the install commands joined with '&&'."""
    config = require_config()
    target = resolve_platform(platform, config)
    catalog = require_catalog(catalog_path, config)
    items = require_selection(catalog, ids, share=share, discovered_path=discovered)

    line = generate_command(items, target)
    if not line:
        print_warning(f"No install commands for {target.display_name}.")
        raise typer.Exit(code=1)

    typer.echo(line)
