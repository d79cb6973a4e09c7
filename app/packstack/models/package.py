"""Installable package models.

A selection handed to the script generators is a list of installable items.
Each item is one of two variants:

- CuratedPackage: an entry of the static catalog with a free-form install
  command per platform.
- DiscoveredPackage: a search result from a package registry that already
  carries the package manager's canonical identifier.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from packstack.models.platform import Category, InstallMethod, Platform


@dataclass(frozen=True, slots=True)
class CuratedPackage:
    """A package from the curated catalog.

    Attributes:
        identifier: Catalog id (e.g., 'vscode').
        name: Display name (e.g., 'Visual Studio Code').
        description: Short human-readable description.
        category: Catalog category.
        platform_commands: Install command per platform, in that platform's
            package manager syntax (e.g., 'brew install --cask spotify').
        size_mb: Estimated download size in MB (if known).
        website: Project homepage (if known).
    """

    identifier: str
    name: str
    description: str
    category: Category
    platform_commands: Mapping[Platform, str] = field(default_factory=dict)
    size_mb: float | None = field(default=None)
    website: str | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.identifier:
            msg = "Package identifier cannot be empty"
            raise ValueError(msg)
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)
        if self.size_mb is not None and self.size_mb < 0:
            msg = f"Package size cannot be negative, got {self.size_mb}"
            raise ValueError(msg)

    def command_for(self, platform: Platform) -> str | None:
        """Resolve the install command for a platform.

        Distribution-specific commands win over the generic linux command,
        which in turn is used only for Linux distributions.

        Args:
            platform: Target platform.

        Returns:
            The install command, or None if the package is not available.
        """
        for candidate in platform.command_chain:
            command = self.platform_commands.get(candidate)
            if command:
                return command
        return None

    def supports(self, platform: Platform) -> bool:
        """Check if the package has an install command for a platform."""
        return self.command_for(platform) is not None


@dataclass(frozen=True, slots=True)
class DiscoveredPackage:
    """A package found by searching a package registry.

    Attributes:
        identifier: Canonical package identifier (e.g., 'firefox', 'Mozilla.Firefox').
        name: Display name.
        description: Short description from the registry.
        package_manager: Package manager the identifier belongs to.
        version: Latest version string (if reported).
        homepage: Project homepage (if reported).
        repository_tag: Repository or channel (e.g., 'cask', 'formula', 'aur', 'core').
        size_mb: Estimated size in MB (if reported).
    """

    identifier: str
    name: str
    description: str
    package_manager: InstallMethod
    version: str | None = field(default=None)
    homepage: str | None = field(default=None)
    repository_tag: str | None = field(default=None)
    size_mb: float | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.identifier:
            msg = "Package identifier cannot be empty"
            raise ValueError(msg)
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)
        if self.size_mb is not None and self.size_mb < 0:
            msg = f"Package size cannot be negative, got {self.size_mb}"
            raise ValueError(msg)


# Type alias for anything the script generators accept
InstallableItem = CuratedPackage | DiscoveredPackage
