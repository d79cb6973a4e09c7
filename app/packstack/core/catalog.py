"""Curated catalog and discovered package loading.

The curated catalog is a TOML file of applications with per-platform
install commands; a default catalog ships with the package. Discovered
packages are registry search results exported as a JSON list.

This module also encodes and decodes share fragments, the comma-separated
list of catalog ids used in share links (e.g. ``#chrome,vscode,spotify``).
"""

import json
import logging
import tomllib
from collections.abc import Iterable
from importlib import resources
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from packstack.models.catalog import CatalogFile, DiscoveredRecord
from packstack.models.package import CuratedPackage, DiscoveredPackage
from packstack.models.platform import Category, Platform

logger = logging.getLogger(__name__)

_DISCOVERED_ADAPTER = TypeAdapter(list[DiscoveredRecord])


class CatalogError(Exception):
    """Base exception for catalog-related errors."""


class CatalogNotFoundError(CatalogError):
    """Raised when a catalog or discovered-packages file is not found."""


class CatalogParseError(CatalogError):
    """Raised when a catalog or discovered-packages file cannot be parsed."""


class CatalogValidationError(CatalogError):
    """Raised when file content doesn't match the schema."""


class UnknownPackageError(CatalogError):
    """Raised when requested ids are not in the catalog."""

    def __init__(self, unknown: list[str]) -> None:
        self.unknown = unknown
        super().__init__(f"Unknown package id(s): {', '.join(unknown)}")


def get_bundled_catalog_path() -> Path:
    """Get the bundled default catalog path.

    Returns:
        Path to the bundled data/catalog.toml
    """
    return resources.files("packstack.data").joinpath("catalog.toml")  # type: ignore[return-value]


def load_catalog(path: Path | None = None) -> dict[str, CuratedPackage]:
    """Load and validate a curated catalog from a TOML file.

    Args:
        path: Path to the catalog file. If None, uses the bundled catalog.

    Returns:
        Curated packages keyed by id, in file order.

    Raises:
        CatalogNotFoundError: If the file doesn't exist.
        CatalogParseError: If the TOML syntax is invalid.
        CatalogValidationError: If the content doesn't match the schema.
    """
    catalog_path = Path(path) if path is not None else Path(get_bundled_catalog_path())

    if not catalog_path.exists():
        raise CatalogNotFoundError(f"Catalog not found: {catalog_path}")

    try:
        with open(catalog_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise CatalogParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise CatalogError(f"Failed to read catalog: {e}") from e

    try:
        catalog = CatalogFile.model_validate(data)
    except ValidationError as e:
        raise CatalogValidationError(f"Invalid catalog content: {e}") from e

    logger.debug("Loaded %d catalog entries from %s", len(catalog.apps), catalog_path)
    return {app_id: entry.to_package(app_id) for app_id, entry in catalog.apps.items()}


def load_discovered(path: Path) -> list[DiscoveredPackage]:
    """Load discovered packages from a JSON file.

    The file holds a list of objects with ``name``, ``identifier``,
    ``packageManager`` (or ``package_manager``) and optional
    ``description``, ``version``, ``homepage``, ``size`` and ``repository``.

    Args:
        path: Path to the JSON file.

    Returns:
        Discovered packages in file order.

    Raises:
        CatalogNotFoundError: If the file doesn't exist.
        CatalogParseError: If the JSON is invalid.
        CatalogValidationError: If a record doesn't match the schema.
    """
    if not path.exists():
        raise CatalogNotFoundError(f"Discovered packages file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CatalogParseError(f"Invalid JSON: {e}") from e
    except OSError as e:
        raise CatalogError(f"Failed to read discovered packages: {e}") from e

    try:
        records = _DISCOVERED_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise CatalogValidationError(f"Invalid discovered package records: {e}") from e

    return [record.to_package() for record in records]


def select_packages(
    catalog: dict[str, CuratedPackage], ids: Iterable[str]
) -> list[CuratedPackage]:
    """Look up catalog ids, keeping request order and dropping repeats.

    Args:
        catalog: Curated packages keyed by id.
        ids: Requested ids.

    Returns:
        Matching packages in request order.

    Raises:
        UnknownPackageError: If any id is not in the catalog.
    """
    selected: list[CuratedPackage] = []
    seen: set[str] = set()
    unknown: list[str] = []

    for app_id in ids:
        if app_id in seen:
            continue
        seen.add(app_id)
        package = catalog.get(app_id)
        if package is None:
            unknown.append(app_id)
        else:
            selected.append(package)

    if unknown:
        raise UnknownPackageError(unknown)
    return selected


def filter_packages(
    packages: Iterable[CuratedPackage],
    category: Category | None = None,
    platform: Platform | None = None,
) -> list[CuratedPackage]:
    """Filter curated packages by category and platform availability."""
    result: list[CuratedPackage] = []
    for package in packages:
        if category is not None and package.category != category:
            continue
        if platform is not None and not package.supports(platform):
            continue
        result.append(package)
    return result


def encode_selection(ids: Iterable[str]) -> str:
    """Encode catalog ids as a share fragment body ('chrome,vscode')."""
    return ",".join(ids)


def decode_selection(fragment: str) -> list[str]:
    """Decode a share fragment into catalog ids.

    Accepts a bare list (``chrome,vscode``), a fragment (``#chrome,vscode``)
    or a full share URL.
    """
    _, _, tail = fragment.rpartition("#")
    return [part.strip() for part in tail.split(",") if part.strip()]
