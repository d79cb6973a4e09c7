"""Unit tests for the Arch Linux (pacman + AUR) script generator."""

from packstack.generators.arch import YAY_REPOSITORY, ArchScriptGenerator
from packstack.models.package import CuratedPackage
from packstack.models.platform import Category, Platform


class TestArchScriptGenerator:
    """Tests for ArchScriptGenerator class."""

    def test_platform(self) -> None:
        """The generator targets Arch Linux."""
        assert ArchScriptGenerator().platform == Platform.ARCH

    def test_uses_arch_command(self, git_package: CuratedPackage) -> None:
        """The Arch-specific catalog command is used."""
        script = ArchScriptGenerator().generate([git_package])
        assert "# PackStack Installation Script for Arch Linux" in script
        assert "packages=('git')" in script
        assert 'pacman -Qi "$name" &> /dev/null' in script

    def test_aur_helper_detection(self, git_package: CuratedPackage) -> None:
        """paru is preferred over yay."""
        script = ArchScriptGenerator().generate([git_package])
        assert script.index("command -v paru") < script.index("command -v yay")
        assert 'aur_helper="paru"' in script

    def test_yay_bootstrap(self, git_package: CuratedPackage) -> None:
        """yay is built from the AUR when no helper exists, without aborting on failure."""
        script = ArchScriptGenerator().generate([git_package])
        assert "sudo pacman -S --needed --noconfirm base-devel git" in script
        assert f'git clone {YAY_REPOSITORY} "$temp_dir/yay"' in script
        assert "makepkg -si --noconfirm" in script
        assert "Could not install yay; AUR packages will be unavailable." in script
        assert 'rm -rf "$temp_dir"' in script
        assert script.index("makepkg") < script.index("set +e")

    def test_aur_fallback(self, git_package: CuratedPackage) -> None:
        """pacman is tried first, then the AUR helper."""
        script = ArchScriptGenerator().generate([git_package])
        assert "if sudo pacman -S --needed --noconfirm $1; then" in script
        assert '"$aur_helper" -S --needed --noconfirm $1' in script
        assert script.index("sudo pacman -S --needed --noconfirm $1") < script.index(
            '"$aur_helper" -S'
        )

    def test_aur_command_resolves(self) -> None:
        """yay commands in the catalog resolve to the package name."""
        brave = CuratedPackage(
            identifier="brave",
            name="Brave",
            description="",
            category=Category.BROWSERS,
            platform_commands={Platform.ARCH: "yay -S brave-bin"},
        )
        assert "packages=('brave-bin')" in ArchScriptGenerator().generate([brave])

    def test_database_sync_best_effort(self, git_package: CuratedPackage) -> None:
        """The package database sync only warns on failure."""
        script = ArchScriptGenerator().generate([git_package])
        assert "sudo pacman -Sy --noconfirm" in script
        assert "Could not update package database, continuing." in script

    def test_database_sync_before_yay_bootstrap(self, git_package: CuratedPackage) -> None:
        """The database is synced before base-devel and git are installed for yay."""
        script = ArchScriptGenerator().generate([git_package])
        assert script.index("sudo pacman -Sy --noconfirm") < script.index(
            "sudo pacman -S --needed --noconfirm base-devel git"
        )
        assert script.index("# Check for AUR helper") < script.index("packages=('git')")
