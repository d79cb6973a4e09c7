"""Catalog file models.

Pydantic models for the curated catalog TOML file and for discovered
package records exported from registry searches (JSON).
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from packstack.models.package import CuratedPackage, DiscoveredPackage
from packstack.models.platform import Category, InstallMethod, Platform


class CatalogEntry(BaseModel):
    """A single curated application in the catalog file.

    Example TOML:
        [apps.vscode]
        name = "Visual Studio Code"
        description = "Code editor from Microsoft"
        category = "development"
        size = 90

        [apps.vscode.platforms]
        windows = "winget install --id Microsoft.VisualStudioCode"
        macos = "brew install --cask visual-studio-code"
    """

    model_config = ConfigDict(extra="forbid")

    name: Annotated[str, Field(min_length=1, description="Application name")]
    description: Annotated[str, Field(max_length=200, description="Short description")] = ""
    category: Annotated[Category, Field(description="Catalog category")]
    website: Annotated[str | None, Field(description="Official website URL")] = None
    size: Annotated[float | None, Field(ge=0, description="Estimated size in MB")] = None
    platforms: Annotated[
        dict[Platform, str],
        Field(default_factory=dict, description="Install command per platform"),
    ]

    @field_validator("platforms")
    @classmethod
    def strip_commands(cls, v: dict[Platform, str]) -> dict[Platform, str]:
        """Normalize whitespace and drop empty commands."""
        return {platform: cmd.strip() for platform, cmd in v.items() if cmd.strip()}

    def to_package(self, identifier: str) -> CuratedPackage:
        """Convert this entry to a CuratedPackage.

        Args:
            identifier: Catalog id (the TOML table key).

        Returns:
            Immutable CuratedPackage.
        """
        return CuratedPackage(
            identifier=identifier,
            name=self.name,
            description=self.description,
            category=self.category,
            platform_commands=dict(self.platforms),
            size_mb=self.size,
            website=self.website,
        )


class CatalogFile(BaseModel):
    """Complete catalog file: a table of applications keyed by id."""

    model_config = ConfigDict(extra="forbid")

    apps: Annotated[
        dict[str, CatalogEntry],
        Field(default_factory=dict, description="Curated applications by id"),
    ]

    @field_validator("apps")
    @classmethod
    def validate_ids(cls, v: dict[str, CatalogEntry]) -> dict[str, CatalogEntry]:
        """Validate that app ids are non-empty and contain no separators."""
        for app_id in v:
            if not app_id or "," in app_id or app_id != app_id.strip():
                msg = f"Invalid app id: {app_id!r}"
                raise ValueError(msg)
        return v


class DiscoveredRecord(BaseModel):
    """A registry search result as exported to JSON.

    Accepts both snake_case and the camelCase key ``packageManager``.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: Annotated[str, Field(min_length=1)]
    identifier: Annotated[str, Field(min_length=1)]
    description: str = ""
    version: str | None = None
    homepage: str | None = None
    size: Annotated[float | None, Field(ge=0)] = None
    repository: str | None = None
    package_manager: Annotated[InstallMethod, Field(alias="packageManager")]

    def to_package(self) -> DiscoveredPackage:
        """Convert this record to a DiscoveredPackage."""
        return DiscoveredPackage(
            identifier=self.identifier,
            name=self.name,
            description=self.description,
            package_manager=self.package_manager,
            version=self.version,
            homepage=self.homepage,
            repository_tag=self.repository,
            size_mb=self.size,
        )
