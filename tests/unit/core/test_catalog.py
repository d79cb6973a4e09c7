"""Unit tests for catalog loading, selection and share fragments."""

import json
from pathlib import Path

import pytest
from packstack.core.catalog import (
    CatalogNotFoundError,
    CatalogParseError,
    CatalogValidationError,
    UnknownPackageError,
    decode_selection,
    encode_selection,
    filter_packages,
    get_bundled_catalog_path,
    load_catalog,
    load_discovered,
    select_packages,
)
from packstack.models.platform import Category, InstallMethod, Platform


class TestLoadCatalog:
    """Tests for load_catalog function."""

    def test_load_file(self, sample_catalog_toml: Path) -> None:
        """Entries are loaded in file order, keyed by id."""
        catalog = load_catalog(sample_catalog_toml)
        assert list(catalog) == ["git", "vlc", "notepad++"]
        assert catalog["vlc"].category == Category.MEDIA
        assert catalog["git"].command_for(Platform.ARCH) == "sudo pacman -S --needed git"

    def test_bundled_catalog(self) -> None:
        """The bundled catalog loads and covers every platform."""
        assert Path(get_bundled_catalog_path()).name == "catalog.toml"
        catalog = load_catalog()
        assert "vscode" in catalog
        assert "notepad++" in catalog
        for platform in Platform:
            assert any(package.supports(platform) for package in catalog.values())

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises CatalogNotFoundError."""
        with pytest.raises(CatalogNotFoundError):
            load_catalog(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises CatalogParseError."""
        path = tmp_path / "catalog.toml"
        path.write_text("[apps.git\nname = ", encoding="utf-8")
        with pytest.raises(CatalogParseError, match="Invalid TOML"):
            load_catalog(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise CatalogValidationError."""
        path = tmp_path / "catalog.toml"
        path.write_text('[apps.git]\nname = "Git"\ncategory = "nonsense"\n', encoding="utf-8")
        with pytest.raises(CatalogValidationError):
            load_catalog(path)


class TestLoadDiscovered:
    """Tests for load_discovered function."""

    def test_load(self, tmp_path: Path) -> None:
        """Records are converted in file order."""
        path = tmp_path / "found.json"
        path.write_text(
            json.dumps(
                [
                    {"name": "ripgrep", "identifier": "ripgrep", "packageManager": "brew"},
                    {
                        "name": "Firefox",
                        "identifier": "firefox",
                        "packageManager": "brew",
                        "repository": "cask",
                    },
                ]
            ),
            encoding="utf-8",
        )
        packages = load_discovered(path)
        assert [p.identifier for p in packages] == ["ripgrep", "firefox"]
        assert packages[0].package_manager == InstallMethod.BREW
        assert packages[1].repository_tag == "cask"

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises CatalogNotFoundError."""
        with pytest.raises(CatalogNotFoundError):
            load_discovered(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Broken JSON raises CatalogParseError."""
        path = tmp_path / "found.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(CatalogParseError):
            load_discovered(path)

    def test_invalid_record(self, tmp_path: Path) -> None:
        """Records without an identifier raise CatalogValidationError."""
        path = tmp_path / "found.json"
        path.write_text(json.dumps([{"name": "x", "packageManager": "brew"}]), encoding="utf-8")
        with pytest.raises(CatalogValidationError):
            load_discovered(path)


class TestSelectPackages:
    """Tests for select_packages and filter_packages."""

    def test_request_order_and_dedup(self, sample_catalog_toml: Path) -> None:
        """Selection follows request order and ignores repeats."""
        catalog = load_catalog(sample_catalog_toml)
        selected = select_packages(catalog, ["vlc", "git", "vlc"])
        assert [p.identifier for p in selected] == ["vlc", "git"]

    def test_unknown_ids(self, sample_catalog_toml: Path) -> None:
        """Unknown ids are all reported together."""
        catalog = load_catalog(sample_catalog_toml)
        with pytest.raises(UnknownPackageError) as exc_info:
            select_packages(catalog, ["git", "nope", "zilch"])
        assert exc_info.value.unknown == ["nope", "zilch"]
        assert "nope, zilch" in str(exc_info.value)

    def test_filter_by_platform(self, sample_catalog_toml: Path) -> None:
        """Packages without a command for the platform are filtered out."""
        catalog = load_catalog(sample_catalog_toml)
        result = filter_packages(catalog.values(), platform=Platform.MACOS)
        assert [p.identifier for p in result] == ["git", "vlc"]

    def test_filter_by_category(self, sample_catalog_toml: Path) -> None:
        """Category filter keeps matching packages only."""
        catalog = load_catalog(sample_catalog_toml)
        result = filter_packages(catalog.values(), category=Category.MEDIA)
        assert [p.identifier for p in result] == ["vlc"]


class TestShareFragments:
    """Tests for encode_selection and decode_selection."""

    def test_encode(self) -> None:
        """Ids are joined with commas."""
        assert encode_selection(["chrome", "vscode", "spotify"]) == "chrome,vscode,spotify"

    @pytest.mark.parametrize(
        "fragment",
        [
            "chrome,vscode",
            "#chrome,vscode",
            "https://example.com/#chrome,vscode",
            "#chrome, vscode,",
        ],
    )
    def test_decode(self, fragment: str) -> None:
        """Bare lists, fragments and full links decode to the same ids."""
        assert decode_selection(fragment) == ["chrome", "vscode"]

    def test_decode_empty(self) -> None:
        """An empty fragment decodes to no ids."""
        assert decode_selection("#") == []
