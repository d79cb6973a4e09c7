"""Generate command implementation.

Builds an installation script for a selection of packages and saves it.
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
from packstack.core.catalog import encode_selection
from packstack.core.extractor import extract_identifier
from packstack.core.packaging import (
    ScriptWriteError,
    build_script,
    format_size,
    get_total_size,
    write_script,
)
from packstack.models.package import CuratedPackage, InstallableItem
from packstack.models.platform import Platform
from packstack.utils.formatting import (
    console,
    create_package_table,
    format_item_row,
    print_error,
    print_success,
    print_warning,
)


def generate(
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
        typer.Option(
            "--share",
            "-s",
            help="Share link or fragment with catalog ids (e.g. '#chrome,vscode').",
        ),
    ] = None,
    discovered: Annotated[
        Path | None,
        typer.Option(
            "--discovered",
            "-d",
            help="JSON file of discovered packages to append to the selection.",
        ),
    ] = None,
    catalog_path: Annotated[
        Path | None,
        typer.Option(
            "--catalog",
            help="Curated catalog TOML file (default: bundled catalog).",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file, or directory if it has no suffix (default: config output_dir, then cwd).",
        ),
    ] = None,
    to_stdout: Annotated[
        bool,
        typer.Option(
            "--stdout",
            help="Print the script to stdout instead of writing a file.",
        ),
    ] = False,
) -> None:
    """Generate an idempotent installation script.

    Examples:
        packstack generate chrome vscode git          # Script for this machine
        packstack generate git -p arch                # Script for Arch Linux
        packstack generate --share '#vlc,spotify'     # Ids from a share link
        packstack generate -d found.json -p macos     # Add discovered packages
        packstack generate git --stdout | bash        # Pipe the script
    """
    config = require_config()
    target = resolve_platform(platform, config)
    catalog = require_catalog(catalog_path, config)
    items = require_selection(catalog, ids, share=share, discovered_path=discovered)

    script = build_script(items, target)

    if to_stdout:
        typer.echo(script.content, nl=False)
        return

    if not items:
        print_warning("No packages selected; the script will not install anything.")
    else:
        _print_selection(items, target)

    try:
        if output is not None:
            path = write_script(script, output)
        else:
            path = write_script(script, config.output_dir or Path.cwd(), directory=True)
    except ScriptWriteError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Saved {target.display_name} script to {path}")

    curated_ids = [item.identifier for item in items if isinstance(item, CuratedPackage)]
    if curated_ids:
        console.print(f"[muted]Share: #{encode_selection(curated_ids)}[/]")


def _print_selection(items: list[InstallableItem], platform: Platform) -> None:
    """Print the selection table and the total size."""
    table = create_package_table(f"Selected Packages ({platform.display_name})")
    skipped = 0
    for item in items:
        identifier = extract_identifier(item, platform)
        if not identifier:
            skipped += 1
        table.add_row(*format_item_row(item, identifier))
    console.print(table)

    console.print(f"\n[muted]Total size: {format_size(get_total_size(items))}[/]")
    if skipped:
        print_warning(
            f"{skipped} package(s) have no {platform.display_name} install command "
            "and will be skipped."
        )
