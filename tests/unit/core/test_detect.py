"""Unit tests for host platform detection."""

from pathlib import Path
from unittest.mock import patch

import pytest
from packstack.core.detect import detect_platform, distro_from_os_release, parse_os_release
from packstack.models.platform import Platform

POP_OS_RELEASE = """\
NAME="Pop!_OS"
VERSION="22.04 LTS"
ID=pop
ID_LIKE="ubuntu debian"
# comment
PRETTY_NAME="Pop!_OS 22.04 LTS"
"""


class TestParseOsRelease:
    """Tests for parse_os_release function."""

    def test_parse(self) -> None:
        """Keys map to unquoted values; comments are ignored."""
        fields = parse_os_release(POP_OS_RELEASE)
        assert fields["ID"] == "pop"
        assert fields["ID_LIKE"] == "ubuntu debian"
        assert fields["NAME"] == "Pop!_OS"
        assert "# comment" not in fields


class TestDistroFromOsRelease:
    """Tests for distro_from_os_release function."""

    @pytest.mark.parametrize(
        ("fields", "expected"),
        [
            ({"ID": "ubuntu"}, Platform.UBUNTU),
            ({"ID": "debian"}, Platform.DEBIAN),
            ({"ID": "arch"}, Platform.ARCH),
            ({"ID": "fedora"}, Platform.FEDORA),
            ({"ID": "pop", "ID_LIKE": "ubuntu debian"}, Platform.UBUNTU),
            ({"ID": "manjaro", "ID_LIKE": "arch"}, Platform.ARCH),
            ({"ID": "gentoo"}, Platform.LINUX),
            ({}, Platform.LINUX),
        ],
    )
    def test_mapping(self, fields: dict[str, str], expected: Platform) -> None:
        """ID wins, then ID_LIKE in order, else generic linux."""
        assert distro_from_os_release(fields) == expected


class TestDetectPlatform:
    """Tests for detect_platform function."""

    def test_windows(self) -> None:
        """Windows is detected."""
        assert detect_platform("Windows") == Platform.WINDOWS

    def test_macos(self) -> None:
        """Darwin maps to macOS."""
        assert detect_platform("Darwin") == Platform.MACOS

    def test_linux_distro(self, tmp_path: Path) -> None:
        """Linux reads os-release."""
        os_release = tmp_path / "os-release"
        os_release.write_text(POP_OS_RELEASE, encoding="utf-8")
        assert detect_platform("Linux", os_release_path=os_release) == Platform.UBUNTU

    def test_linux_without_os_release(self, tmp_path: Path) -> None:
        """Unreadable os-release gives generic linux."""
        assert detect_platform("Linux", os_release_path=tmp_path / "missing") == Platform.LINUX

    def test_unknown_system(self) -> None:
        """Unrecognized systems default to Windows."""
        assert detect_platform("SunOS") == Platform.WINDOWS

    def test_queries_running_system(self) -> None:
        """Without an argument, platform.system() is used."""
        with patch("packstack.core.detect.platform.system", return_value="Darwin"):
            assert detect_platform() == Platform.MACOS
