"""Catalog command implementation.

Lists the curated catalog and what each package resolves to on a platform.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from packstack.cli.types import require_catalog, require_config, resolve_platform
from packstack.core.catalog import filter_packages
from packstack.core.extractor import extract_identifier
from packstack.core.packaging import format_size
from packstack.models.platform import Category, Platform
from packstack.utils.formatting import console, print_info


def list_catalog(
    category: Annotated[
        Category | None,
        typer.Option(
            "--category",
            "-c",
            help="Only show packages of this category.",
            case_sensitive=False,
        ),
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
    available_only: Annotated[
        bool,
        typer.Option("--available", "-a", help="Hide packages unavailable on the platform."),
    ] = False,
    catalog_path: Annotated[
        Path | None,
        typer.Option("--catalog", help="Curated catalog TOML file."),
    ] = None,
) -> None:
    """List curated packages and their identifiers on a platform."""
    config = require_config()
    target = resolve_platform(platform, config)
    catalog = require_catalog(catalog_path, config)

    packages = filter_packages(
        catalog.values(),
        category=category,
        platform=target if available_only else None,
    )
    if not packages:
        print_info("No packages match the given filters.")
        return

    table = Table(
        title=f"Catalog ({target.display_name})",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Id", style="info", no_wrap=True)
    table.add_column("Name")
    table.add_column("Category", style="muted")
    table.add_column("Identifier")
    table.add_column("Size", justify="right", style="info")

    for package in packages:
        identifier = extract_identifier(package, target)
        table.add_row(
            package.identifier,
            package.name,
            package.category.display_name,
            f"[available]{escape(identifier)}[/]" if identifier else "[unavailable]-[/]",
            format_size(package.size_mb) if package.size_mb is not None else "-",
        )

    console.print(table)
    console.print(f"\n[muted]{len(packages)} package(s)[/]")
