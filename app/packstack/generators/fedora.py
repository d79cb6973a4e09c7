"""Fedora (dnf) script generator."""

from packstack.generators.base import ResolvedPackage
from packstack.generators.shell import PackageGroup, ShellScriptGenerator, echo
from packstack.models.platform import Platform


class FedoraScriptGenerator(ShellScriptGenerator):
    """Generator for dnf-based Fedora systems.

    ``dnf check-update`` exits with 100 when updates are available, so the
    refresh step treats 0 and 100 as success and anything else as a warning.
    """

    @property
    def platform(self) -> Platform:
        """Return FEDORA as the target platform."""
        return Platform.FEDORA

    def refresh_lines(self) -> list[str]:
        """Return the best-effort ``dnf check-update`` step."""
        return [
            "# Refresh package metadata (best effort)",
            echo("Checking for package updates...", "CYAN"),
            "if sudo dnf check-update > /dev/null 2>&1; then",
            "    " + echo("Package metadata is up to date.", "GREEN"),
            "else",
            "    refresh_status=$?",
            '    if [ "$refresh_status" -eq 100 ]; then',
            "        " + echo("Package metadata refreshed (updates available).", "GREEN"),
            "    else",
            "        "
            + echo("Could not refresh package metadata (exit $refresh_status), continuing.", "YELLOW"),
            "    fi",
            "fi",
            'echo ""',
        ]

    def groups(self, packages: list[ResolvedPackage]) -> list[PackageGroup]:
        """Return a single dnf group with all packages."""
        return [
            PackageGroup(
                array="packages",
                title="Install packages",
                packages=tuple(pkg.identifier for pkg in packages),
                check_function="is_installed",
                check_command='rpm -q "$name" &> /dev/null',
                install_function="install_package",
                install_lines=("sudo dnf install -y $1",),
            )
        ]
