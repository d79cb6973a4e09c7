"""Shared helpers for CLI commands.

Resolves the target platform and the package selection from command-line
options and the user configuration.
"""

from pathlib import Path

import typer

from packstack.core.catalog import (
    CatalogError,
    decode_selection,
    load_catalog,
    load_discovered,
    select_packages,
)
from packstack.core.config import ConfigError, PackstackConfig, load_config_or_default
from packstack.core.detect import detect_platform
from packstack.models.package import CuratedPackage, InstallableItem
from packstack.models.platform import Platform
from packstack.utils.formatting import print_error


def require_config() -> PackstackConfig:
    """Load the user configuration or exit with an error.

    Returns:
        The configuration (defaults if no config file exists).

    Raises:
        typer.Exit: If the config file is invalid.
    """
    try:
        return load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def resolve_platform(platform: Platform | None, config: PackstackConfig) -> Platform:
    """Pick the target platform: option, then config, then the local machine."""
    if platform is not None:
        return platform
    if config.default_platform is not None:
        return config.default_platform
    return detect_platform()


def require_catalog(
    catalog_path: Path | None, config: PackstackConfig
) -> dict[str, CuratedPackage]:
    """Load the curated catalog or exit with an error.

    Args:
        catalog_path: Catalog file given on the command line.
        config: User configuration (its catalog_path is the fallback).

    Returns:
        Curated packages keyed by id.

    Raises:
        typer.Exit: If the catalog cannot be loaded.
    """
    try:
        return load_catalog(catalog_path or config.catalog_path)
    except CatalogError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def require_selection(
    catalog: dict[str, CuratedPackage],
    ids: list[str] | None,
    share: str | None = None,
    discovered_path: Path | None = None,
) -> list[InstallableItem]:
    """Build the selection from catalog ids, a share fragment and a discovered file.

    Curated packages come first, in the order requested, followed by the
    discovered packages in file order.

    Raises:
        typer.Exit: If an id is unknown or the discovered file is invalid.
    """
    requested = list(ids or [])
    if share:
        requested.extend(decode_selection(share))

    try:
        items: list[InstallableItem] = list(select_packages(catalog, requested))
        if discovered_path is not None:
            items.extend(load_discovered(discovered_path))
    except CatalogError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    return items
