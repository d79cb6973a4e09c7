"""Arch Linux (pacman + AUR) script generator."""

from packstack.generators.base import ResolvedPackage
from packstack.generators.shell import PackageGroup, ShellScriptGenerator, echo
from packstack.models.platform import Platform

YAY_REPOSITORY = "https://aur.archlinux.org/yay.git"


class ArchScriptGenerator(ShellScriptGenerator):
    """Generator for pacman-based Arch Linux systems.

    Packages are installed from the official repositories with pacman first;
    if that fails, the AUR helper (paru, else yay) is tried before the
    package is recorded as failed. When no helper exists, yay is built from
    the AUR. A failed yay build disables the AUR fallback instead of
    aborting the script.
    """

    @property
    def platform(self) -> Platform:
        """Return ARCH as the target platform."""
        return Platform.ARCH

    def bootstrap_lines(self) -> list[str]:
        """Return AUR helper detection and the yay bootstrap."""
        return [
            "# Check for AUR helper",
            'aur_helper=""',
            "if command -v paru &> /dev/null; then",
            '    aur_helper="paru"',
            "    " + echo("Found AUR helper: paru", "GREEN"),
            "elif command -v yay &> /dev/null; then",
            '    aur_helper="yay"',
            "    " + echo("Found AUR helper: yay", "GREEN"),
            "else",
            "    " + echo("No AUR helper found (paru or yay).", "YELLOW"),
            "    " + echo("Installing yay (AUR helper)..."),
            '    echo ""',
            "    temp_dir=$(mktemp -d)",
            "    if sudo pacman -S --needed --noconfirm base-devel git \\",
            f'        && git clone {YAY_REPOSITORY} "$temp_dir/yay" \\',
            '        && (cd "$temp_dir/yay" && makepkg -si --noconfirm); then',
            '        aur_helper="yay"',
            "        " + echo("yay installed successfully!", "GREEN"),
            "    else",
            "        " + echo("Could not install yay; AUR packages will be unavailable.", "RED"),
            "    fi",
            '    rm -rf "$temp_dir"',
            "fi",
            'echo ""',
        ]

    def refresh_lines(self) -> list[str]:
        """Return the best-effort package database sync."""
        return [
            "# Update package database (best effort)",
            echo("Updating package database...", "CYAN"),
            "if sudo pacman -Sy --noconfirm > /dev/null 2>&1; then",
            "    " + echo("Package database updated.", "GREEN"),
            "else",
            "    " + echo("Could not update package database, continuing.", "YELLOW"),
            "fi",
            'echo ""',
        ]

    def setup_sections(self) -> list[list[str]]:
        """Sync the package database before bootstrapping yay."""
        return [self.refresh_lines(), self.bootstrap_lines()]

    def groups(self, packages: list[ResolvedPackage]) -> list[PackageGroup]:
        """Return a single pacman group with AUR fallback."""
        return [
            PackageGroup(
                array="packages",
                title="Install packages (official repositories first, then AUR)",
                packages=tuple(pkg.identifier for pkg in packages),
                check_function="is_installed",
                check_command='pacman -Qi "$name" &> /dev/null',
                install_function="install_package",
                install_lines=(
                    "if sudo pacman -S --needed --noconfirm $1; then",
                    "    return 0",
                    "fi",
                    'if [ -z "$aur_helper" ]; then',
                    "    " + echo("  Not in official repositories and no AUR helper available", "YELLOW"),
                    "    return 1",
                    "fi",
                    echo("  Not in official repositories, trying AUR with $aur_helper...", "YELLOW"),
                    '"$aur_helper" -S --needed --noconfirm $1',
                ),
            )
        ]
