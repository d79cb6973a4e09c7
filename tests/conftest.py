"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Callable, Iterator
from datetime import UTC, datetime
from pathlib import Path

import pytest
from packstack.models.package import CuratedPackage, DiscoveredPackage
from packstack.models.platform import Category, InstallMethod, Platform

FIXED_TIME = datetime(2024, 1, 15, 10, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Put back the root logger configuration changed by the CLI logging setup."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock returning a constant timestamp."""
    return lambda: FIXED_TIME


@pytest.fixture
def git_package() -> CuratedPackage:
    """Curated git package with generic and distro-specific commands."""
    return CuratedPackage(
        identifier="git",
        name="Git",
        description="Distributed version control system",
        category=Category.DEVELOPMENT,
        platform_commands={
            Platform.WINDOWS: "winget install --id Git.Git -e",
            Platform.MACOS: "brew install git",
            Platform.LINUX: "sudo apt install git",
            Platform.ARCH: "sudo pacman -S --needed git",
            Platform.FEDORA: "sudo dnf install -y git",
        },
        size_mb=50,
    )


@pytest.fixture
def spotify_package() -> CuratedPackage:
    """Curated GUI package installed as a Homebrew cask; snap-only on Linux."""
    return CuratedPackage(
        identifier="spotify",
        name="Spotify",
        description="Music streaming service",
        category=Category.MEDIA,
        platform_commands={
            Platform.WINDOWS: "winget install --id Spotify.Spotify",
            Platform.MACOS: "brew install --cask spotify",
            Platform.LINUX: "sudo snap install spotify",
        },
        size_mb=150,
    )


@pytest.fixture
def notepad_package() -> CuratedPackage:
    """Curated package available on Windows only."""
    return CuratedPackage(
        identifier="notepad++",
        name="Notepad++",
        description="Source code editor",
        category=Category.UTILITIES,
        platform_commands={Platform.WINDOWS: "winget install --id Notepad++.Notepad++"},
        size_mb=5,
    )


@pytest.fixture
def ripgrep_discovered() -> DiscoveredPackage:
    """Discovered command-line package without a repository tag."""
    return DiscoveredPackage(
        identifier="ripgrep",
        name="ripgrep",
        description="Recursively search directories for a regex pattern",
        package_manager=InstallMethod.BREW,
        version="14.1.0",
    )


@pytest.fixture
def sample_catalog_toml(tmp_path: Path) -> Path:
    """Small valid catalog file."""
    path = tmp_path / "catalog.toml"
    path.write_text(
        """
[apps.git]
name = "Git"
description = "Distributed version control system"
category = "development"
size = 50

[apps.git.platforms]
windows = "winget install --id Git.Git -e"
macos = "brew install git"
linux = "sudo apt install git"
arch = "sudo pacman -S --needed git"

[apps.vlc]
name = "VLC"
description = "Media player"
category = "media"
size = 55

[apps.vlc.platforms]
windows = "winget install --id VideoLAN.VLC"
macos = "brew install --cask vlc"
linux = "sudo apt install vlc"

[apps."notepad++"]
name = "Notepad++"
category = "utilities"
size = 5

[apps."notepad++".platforms]
windows = "winget install --id Notepad++.Notepad++"
""",
        encoding="utf-8",
    )
    return path
