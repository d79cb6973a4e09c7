"""Bash script template shared by the macOS and Linux generators.

Every shell script has the same shape:

1. Header comments and ``set -e`` for the setup steps
2. Colour definitions and banner
3. Package manager bootstrap and best-effort metadata refresh (platform
   hooks, bootstrap first unless the platform reorders them)
4. ``set +e`` and one install loop per package group
5. Summary, exit prompt and exit status

Only the package manager commands differ between platforms, and those are
provided as data through PackageGroup.
"""

from abc import abstractmethod
from dataclasses import dataclass

from packstack.generators.base import BRAND, ResolvedPackage, ScriptGenerator
from packstack.generators.builder import ScriptBuilder, shell_quote
from packstack.models.package import InstallableItem

COLOR_LINES = (
    "# Colors for output",
    "RED=$'\\033[0;31m'",
    "GREEN=$'\\033[0;32m'",
    "YELLOW=$'\\033[1;33m'",
    "CYAN=$'\\033[0;36m'",
    "NC=$'\\033[0m' # No Color",
)

RULE = "========================================"


@dataclass(frozen=True, slots=True)
class PackageGroup:
    """Packages installed by one loop with the same manager commands.

    The presence check runs once per word of a package unit with the word in
    ``$name``; the install body receives the whole unit unquoted in ``$1`` so
    multi-word units expand to several arguments.

    Attributes:
        array: Bash array variable holding the identifiers.
        title: Comment line above the loop.
        packages: Identifiers in install order.
        check_function: Name of the generated presence-check function.
        check_command: Command that succeeds if ``$name`` is installed.
        install_function: Name of the generated install function.
        install_lines: Body of the install function.
        empty_note: Comment emitted instead of the loop when there are no packages.
    """

    array: str
    title: str
    packages: tuple[str, ...]
    check_function: str
    check_command: str
    install_function: str
    install_lines: tuple[str, ...]
    empty_note: str = "# No packages selected"


def echo(message: str, color: str | None = None) -> str:
    """Return an echo line, optionally wrapped in a colour variable."""
    if color is None:
        return f'echo "{message}"'
    return f'echo "${{{color}}}{message}${{NC}}"'


class ShellScriptGenerator(ScriptGenerator):
    """Template for bash installation scripts.

    Subclasses provide the package groups and may override the bootstrap
    and refresh hooks.
    """

    @property
    def banner_title(self) -> str:
        """Return the title printed in the banner."""
        return f"{BRAND} {self.display_name} Installer"

    def bootstrap_lines(self) -> list[str]:
        """Return lines that detect or install the package manager."""
        return []

    def refresh_lines(self) -> list[str]:
        """Return lines that refresh package metadata (must not fail the script)."""
        return []

    def setup_sections(self) -> list[list[str]]:
        """Return the setup hooks in the order they run."""
        return [self.bootstrap_lines(), self.refresh_lines()]

    @abstractmethod
    def groups(self, packages: list[ResolvedPackage]) -> list[PackageGroup]:
        """Partition resolved packages into install groups."""

    def build(
        self,
        builder: ScriptBuilder,
        packages: list[ResolvedPackage],
        skipped: list[InstallableItem],
    ) -> None:
        """Write the bash script sections into the builder."""
        builder.section("#!/usr/bin/env bash", *self.header_comments(skipped))
        builder.section("# Setup steps are fatal on error; package installs are not", "set -e")
        builder.section(*COLOR_LINES)
        builder.section(
            'echo ""',
            echo(RULE),
            echo(f"  {self.banner_title}"),
            echo(RULE),
            'echo ""',
            echo(f"Preparing to install {len(packages)} package(s)..."),
            'echo ""',
        )

        for lines in self.setup_sections():
            if lines:
                builder.section(*lines)

        builder.section(
            "# Each package records its own failure; keep going after errors",
            "set +e",
        )
        builder.section(
            "# Track installation results",
            "success_count=0",
            "skipped_count=0",
            "failed_count=0",
            "failed_packages=()",
            f"total_count={len(packages)}",
            "current_index=0",
        )

        for group in self.groups(packages):
            self._build_group(builder, group)

        builder.section(*self._summary_lines())
        builder.section(*self._exit_lines())

    def _build_group(self, builder: ScriptBuilder, group: PackageGroup) -> None:
        """Write the functions, array and loop for one package group."""
        if not group.packages:
            builder.section(f"# {group.title}", group.empty_note)
            return

        builder.section(
            f"{group.check_function}() {{",
            "    local name",
            "    for name in $1; do",
            f"        {group.check_command} || return 1",
            "    done",
            "    return 0",
            "}",
        )
        builder.section(
            f"{group.install_function}() {{",
            *(f"    {line}" for line in group.install_lines),
            "}",
        )

        package_list = " ".join(shell_quote(pkg) for pkg in group.packages)
        builder.section(
            f"# {group.title}",
            f"{group.array}=({package_list})",
            f'for pkg in "${{{group.array}[@]}}"; do',
            "    current_index=$((current_index + 1))",
            "    " + echo("[$current_index/$total_count] Installing: $pkg", "CYAN"),
            "",
            f'    if {group.check_function} "$pkg"; then',
            "        " + echo("  Already installed (skipped): $pkg", "YELLOW"),
            "        success_count=$((success_count + 1))",
            "        skipped_count=$((skipped_count + 1))",
            f'    elif {group.install_function} "$pkg"; then',
            "        # A zero exit status is not proof; query the package manager again",
            f'        if {group.check_function} "$pkg"; then',
            "            " + echo("  Successfully installed: $pkg", "GREEN"),
            "            success_count=$((success_count + 1))",
            "        else",
            "            " + echo("  Installation completed but package not found: $pkg", "RED"),
            '            failed_packages+=("$pkg")',
            "            failed_count=$((failed_count + 1))",
            "        fi",
            "    else",
            "        " + echo("  Failed to install: $pkg", "RED"),
            '        failed_packages+=("$pkg")',
            "        failed_count=$((failed_count + 1))",
            "    fi",
            '    echo ""',
            "done",
        )

    def _summary_lines(self) -> list[str]:
        return [
            "# Summary",
            echo(RULE),
            echo("  Installation Summary"),
            echo(RULE),
            'echo ""',
            echo("Succeeded: $success_count (already installed: $skipped_count)", "GREEN"),
            'if [ "$failed_count" -gt 0 ]; then',
            "    " + echo("Failed installations: $failed_count", "RED"),
            '    echo ""',
            "    " + echo("Failed packages:"),
            '    for pkg in "${failed_packages[@]}"; do',
            "        " + echo("  - $pkg", "RED"),
            "    done",
            "fi",
            'echo ""',
            "",
            'if [ "$failed_count" -eq 0 ]; then',
            "    " + echo("All packages installed successfully!", "GREEN"),
            "else",
            "    "
            + echo("Some packages failed to install. Please check the errors above.", "YELLOW"),
            "fi",
            'echo ""',
        ]

    def _exit_lines(self) -> list[str]:
        return [
            'if [ -t 0 ]; then',
            '    read -r -p "Press Enter to exit..." _',
            "fi",
            "",
            'if [ "$failed_count" -gt 0 ]; then',
            "    exit 1",
            "fi",
            "exit 0",
        ]
