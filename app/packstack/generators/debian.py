"""Debian-family (apt) script generator.

Used for Ubuntu, Debian and, as the safe default, generic Linux.
"""

from packstack.generators.base import Clock, ResolvedPackage
from packstack.generators.shell import PackageGroup, ShellScriptGenerator, echo
from packstack.models.platform import Platform


class DebianScriptGenerator(ShellScriptGenerator):
    """Generator for apt-based distributions.

    Refreshes the package lists with ``apt update`` (best effort), checks
    presence with ``dpkg -l`` and installs with ``apt install -y``.
    """

    def __init__(self, platform: Platform = Platform.DEBIAN, clock: Clock | None = None) -> None:
        """Initialize the generator.

        Args:
            platform: UBUNTU, DEBIAN or LINUX; selects banner text and which
                catalog commands are consulted.
            clock: Timestamp source for the script header.
        """
        super().__init__(clock=clock)
        if platform not in (Platform.UBUNTU, Platform.DEBIAN, Platform.LINUX):
            msg = f"Not an apt-based platform: {platform.value}"
            raise ValueError(msg)
        self._platform = platform

    @property
    def platform(self) -> Platform:
        """Return the apt-based platform this generator targets."""
        return self._platform

    def refresh_lines(self) -> list[str]:
        """Return the best-effort ``apt update`` step."""
        return [
            "# Update package list (best effort)",
            echo("Updating package list...", "CYAN"),
            "if sudo apt update -qq; then",
            "    " + echo("Package list updated.", "GREEN"),
            "else",
            "    " + echo("Could not update package list, continuing.", "YELLOW"),
            "fi",
            'echo ""',
        ]

    def groups(self, packages: list[ResolvedPackage]) -> list[PackageGroup]:
        """Return a single apt group with all packages."""
        return [
            PackageGroup(
                array="packages",
                title="Install packages",
                packages=tuple(pkg.identifier for pkg in packages),
                check_function="is_installed",
                check_command='dpkg -l "$name" 2>/dev/null | grep -q "^ii"',
                install_function="install_package",
                install_lines=("sudo apt install -y $1",),
            )
        ]
