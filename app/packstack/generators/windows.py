"""Windows (PowerShell + winget) script generator."""

from packstack.generators.base import BRAND, ResolvedPackage, ScriptGenerator
from packstack.generators.builder import ScriptBuilder, powershell_quote
from packstack.models.package import InstallableItem
from packstack.models.platform import Platform

# Microsoft Store listing for App Installer, which ships winget
APP_INSTALLER_STORE_URI = "ms-windows-store://pdp/?productid=9NBLGGH4NNS1"

RULE = "========================================"


def write_host(message: str, color: str | None = None) -> str:
    """Return a Write-Host line, optionally with a foreground colour."""
    if color is None:
        return f'Write-Host "{message}"'
    return f'Write-Host "{message}" -ForegroundColor {color}'


class WindowsScriptGenerator(ScriptGenerator):
    """Generator for PowerShell scripts using winget.

    The script warns (without aborting) when not elevated, exits with status
    1 after opening the Microsoft Store when winget is missing, and wraps
    each package in try/catch so one failure never stops the loop. Setup
    steps run with ``$ErrorActionPreference = "Stop"``; the package loop
    runs with ``"Continue"``.
    """

    @property
    def platform(self) -> Platform:
        """Return WINDOWS as the target platform."""
        return Platform.WINDOWS

    def build(
        self,
        builder: ScriptBuilder,
        packages: list[ResolvedPackage],
        skipped: list[InstallableItem],
    ) -> None:
        """Write the PowerShell script sections into the builder."""
        builder.section(*self.header_comments(skipped))
        builder.section(
            "# Setup steps are fatal on error; package installs are not",
            '$ErrorActionPreference = "Stop"',
        )
        builder.section(*self._admin_check_lines())
        builder.section(
            write_host(RULE, "Cyan"),
            write_host(f"  {BRAND} Windows Installer", "Cyan"),
            write_host(RULE, "Cyan"),
            'Write-Host ""',
            write_host(f"Preparing to install {len(packages)} package(s)...", "Green"),
            'Write-Host ""',
        )
        builder.section(*self._winget_check_lines())
        builder.section(*self._source_update_lines())
        builder.section(
            "# Each package records its own failure; keep going after errors",
            '$ErrorActionPreference = "Continue"',
        )
        builder.section(
            "function Test-PackageInstalled {",
            "    param([string]$Id)",
            "    $null = winget list --id $Id -e --accept-source-agreements 2>$null",
            "    return ($LASTEXITCODE -eq 0)",
            "}",
        )
        builder.section(
            "# Track installation results",
            "$successCount = 0",
            "$skippedCount = 0",
            "$failedCount = 0",
            "$failedPackages = @()",
        )
        builder.section(*self._loop_lines(packages))
        builder.section(*self._summary_lines())

    def _admin_check_lines(self) -> list[str]:
        return [
            "# Administrator check (non-blocking)",
            "$isAdmin = ([Security.Principal.WindowsPrincipal] "
            "[Security.Principal.WindowsIdentity]::GetCurrent()).IsInRole("
            "[Security.Principal.WindowsBuiltInRole]::Administrator)",
            "if (-not $isAdmin) {",
            '    Write-Warning "This script is not running as Administrator. '
            'Some installations may require elevation."',
            "    "
            + write_host(
                "If installations fail, right-click and choose 'Run as Administrator'", "Yellow"
            ),
            '    Write-Host ""',
            "}",
        ]

    def _winget_check_lines(self) -> list[str]:
        return [
            "# Check for winget",
            "if (-not (Get-Command winget -ErrorAction SilentlyContinue)) {",
            '    Write-Warning "Windows Package Manager (winget) is not installed."',
            '    Write-Host ""',
            "    " + write_host(" winget is required to install packages automatically.", "Yellow"),
            "    " + write_host(" Please install 'App Installer' from the Microsoft Store.", "Yellow"),
            '    Write-Host ""',
            "    " + write_host(" Opening Microsoft Store...", "Cyan"),
            f'    Start-Process "{APP_INSTALLER_STORE_URI}"',
            '    Write-Host ""',
            "    " + write_host(" After installing App Installer, run this script again.", "Yellow"),
            '    Write-Host ""',
            '    Read-Host "Press Enter to exit"',
            "    exit 1",
            "}",
            "",
            write_host("Windows Package Manager found: $((winget --version).Trim())", "Green"),
            'Write-Host ""',
        ]

    def _source_update_lines(self) -> list[str]:
        return [
            "# Update winget sources (best effort)",
            write_host("Updating package sources...", "Cyan"),
            "try {",
            "    winget source update 2>&1 | Out-Null",
            "    if ($LASTEXITCODE -eq 0) {",
            "        " + write_host("Package sources updated.", "Green"),
            "    } else {",
            '        Write-Warning "Could not update package sources, continuing."',
            "    }",
            "} catch {",
            '    Write-Warning "Could not update package sources, continuing."',
            "}",
            'Write-Host ""',
        ]

    def _loop_lines(self, packages: list[ResolvedPackage]) -> list[str]:
        package_list = ", ".join(powershell_quote(pkg.identifier) for pkg in packages)
        return [
            "# Install packages",
            f"$packages = @({package_list})",
            "$currentIndex = 0",
            "",
            "foreach ($pkg in $packages) {",
            "    $currentIndex++",
            "    " + write_host("[$currentIndex/$($packages.Count)] Installing: $pkg", "Cyan"),
            "",
            "    try {",
            "        if (Test-PackageInstalled $pkg) {",
            "            " + write_host("  Already installed (skipped): $pkg", "Yellow"),
            "            $successCount++",
            "            $skippedCount++",
            "        } else {",
            "            winget install --id $pkg -e --silent "
            "--accept-package-agreements --accept-source-agreements 2>&1 | Out-Host",
            "            $exitCode = $LASTEXITCODE",
            "",
            "            # An exit code alone is not proof; query winget again",
            "            if (Test-PackageInstalled $pkg) {",
            "                if ($exitCode -eq 0) {",
            "                    " + write_host("  Successfully installed: $pkg", "Green"),
            "                } else {",
            "                    "
            + write_host("  Verified as installed (installer returned $exitCode): $pkg", "Green"),
            "                }",
            "                $successCount++",
            "            } elseif ($exitCode -eq 0) {",
            "                "
            + write_host("  Installation completed but package not found: $pkg", "Red"),
            "                $failedPackages += $pkg",
            "                $failedCount++",
            "            } else {",
            "                " + write_host("  Failed to install: $pkg (exit code $exitCode)", "Red"),
            "                $failedPackages += $pkg",
            "                $failedCount++",
            "            }",
            "        }",
            "    } catch {",
            "        " + write_host("  Error installing ${pkg}: $($_.Exception.Message)", "Red"),
            "        $failedPackages += $pkg",
            "        $failedCount++",
            "    }",
            "",
            '    Write-Host ""',
            "}",
        ]

    def _summary_lines(self) -> list[str]:
        return [
            "# Summary",
            write_host(RULE, "Cyan"),
            write_host("  Installation Summary", "Cyan"),
            write_host(RULE, "Cyan"),
            'Write-Host ""',
            write_host("Succeeded: $successCount (already installed: $skippedCount)", "Green"),
            "if ($failedCount -gt 0) {",
            "    " + write_host("Failed installations: $failedCount", "Red"),
            '    Write-Host ""',
            "    " + write_host("Failed packages:", "Red"),
            '    $failedPackages | ForEach-Object { Write-Host "  - $_" -ForegroundColor Red }',
            "}",
            'Write-Host ""',
            "",
            "if ($failedCount -eq 0) {",
            "    " + write_host("All packages installed successfully!", "Green"),
            "} else {",
            "    "
            + write_host("Some packages failed to install. Please check the errors above.", "Yellow"),
            "}",
            "",
            'Write-Host ""',
            'Read-Host "Press Enter to exit"',
            "if ($failedCount -gt 0) {",
            "    exit 1",
            "}",
            "exit 0",
        ]
