"""Unit tests for catalog file models."""

import pytest
from packstack.models.catalog import CatalogEntry, CatalogFile, DiscoveredRecord
from packstack.models.platform import Category, InstallMethod, Platform
from pydantic import ValidationError


class TestCatalogEntry:
    """Tests for CatalogEntry model."""

    def test_to_package(self) -> None:
        """Entries convert to CuratedPackage with their table key as id."""
        entry = CatalogEntry(
            name="VLC",
            category=Category.MEDIA,
            size=55,
            platforms={Platform.MACOS: "brew install --cask vlc"},
        )
        package = entry.to_package("vlc")
        assert package.identifier == "vlc"
        assert package.name == "VLC"
        assert package.size_mb == 55
        assert package.command_for(Platform.MACOS) == "brew install --cask vlc"

    def test_strips_and_drops_empty_commands(self) -> None:
        """Whitespace is trimmed and blank commands are removed."""
        entry = CatalogEntry.model_validate(
            {
                "name": "Git",
                "category": "development",
                "platforms": {"linux": "  sudo apt install git  ", "macos": "   "},
            }
        )
        assert entry.platforms == {Platform.LINUX: "sudo apt install git"}

    def test_unknown_platform_rejected(self) -> None:
        """Platform keys must be known ids."""
        with pytest.raises(ValidationError):
            CatalogEntry.model_validate(
                {"name": "Git", "category": "development", "platforms": {"beos": "x"}}
            )

    def test_extra_fields_rejected(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            CatalogEntry.model_validate(
                {"name": "Git", "category": "development", "license": "GPL"}
            )

    def test_negative_size_rejected(self) -> None:
        """Sizes cannot be negative."""
        with pytest.raises(ValidationError):
            CatalogEntry(name="Git", category=Category.DEVELOPMENT, size=-5)


class TestCatalogFile:
    """Tests for CatalogFile model."""

    def test_comma_in_id_rejected(self) -> None:
        """Ids cannot contain the share separator."""
        with pytest.raises(ValidationError, match="Invalid app id"):
            CatalogFile.model_validate(
                {"apps": {"a,b": {"name": "A", "category": "utilities"}}}
            )

    def test_empty_catalog(self) -> None:
        """A file without apps is valid."""
        assert CatalogFile.model_validate({}).apps == {}


class TestDiscoveredRecord:
    """Tests for DiscoveredRecord model."""

    def test_camel_case_alias(self) -> None:
        """packageManager is accepted as the key for the package manager."""
        record = DiscoveredRecord.model_validate(
            {"name": "Firefox", "identifier": "firefox", "packageManager": "brew"}
        )
        assert record.package_manager == InstallMethod.BREW

    def test_snake_case_name(self) -> None:
        """package_manager is accepted as well."""
        record = DiscoveredRecord.model_validate(
            {"name": "Firefox", "identifier": "firefox", "package_manager": "pacman"}
        )
        assert record.package_manager == InstallMethod.PACMAN

    def test_extra_fields_ignored(self) -> None:
        """Unknown registry fields are ignored."""
        record = DiscoveredRecord.model_validate(
            {
                "name": "Firefox",
                "identifier": "firefox",
                "packageManager": "brew",
                "downloads": 12345,
            }
        )
        assert record.identifier == "firefox"

    def test_to_package_maps_repository(self) -> None:
        """The repository field becomes the repository tag."""
        record = DiscoveredRecord.model_validate(
            {
                "name": "Firefox",
                "identifier": "firefox",
                "packageManager": "brew",
                "repository": "cask",
                "size": 80,
            }
        )
        package = record.to_package()
        assert package.repository_tag == "cask"
        assert package.size_mb == 80
