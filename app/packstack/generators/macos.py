"""macOS (Homebrew) script generator.

Homebrew installs GUI applications as casks and command-line tools as
formulae, with different list/install commands. Packages are partitioned
into the two groups as follows:

- Curated packages: the ``--cask`` flag in the catalog command decides.
- Discovered packages with a repository tag: ``cask`` means cask, any other
  tag means formula.
- Discovered packages without a tag: a keyword list of well-known GUI
  applications. This is a best-effort guess and can misclassify, e.g. a
  formula whose name contains one of the keywords.
"""

import logging
import re

from packstack.generators.base import ResolvedPackage
from packstack.generators.shell import PackageGroup, ShellScriptGenerator, echo
from packstack.models.package import CuratedPackage, DiscoveredPackage
from packstack.models.platform import Platform

logger = logging.getLogger(__name__)

HOMEBREW_INSTALL_URL = "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"

# Names strongly associated with GUI applications distributed as casks
GUI_APP_KEYWORDS: frozenset[str] = frozenset(
    {
        "1password",
        "alfred",
        "android-studio",
        "audacity",
        "bitwarden",
        "blender",
        "brave",
        "brave-browser",
        "chrome",
        "discord",
        "docker",
        "dropbox",
        "figma",
        "firefox",
        "gimp",
        "handbrake",
        "inkscape",
        "iterm2",
        "keka",
        "notion",
        "obs",
        "obsidian",
        "postman",
        "raycast",
        "rectangle",
        "signal",
        "skype",
        "slack",
        "spotify",
        "steam",
        "sublime-text",
        "tableplus",
        "telegram",
        "the-unarchiver",
        "transmission",
        "utm",
        "virtualbox",
        "visual-studio-code",
        "vlc",
        "whatsapp",
        "zoom",
    }
)

_WORD_SEPARATORS = re.compile(r"[-_.\s/@]+")


def looks_like_gui_app(*names: str) -> bool:
    """Check if any of the names matches a known GUI application keyword.

    A name matches when it equals a keyword or one of its words (split on
    dashes, dots, underscores, slashes and spaces) is a keyword.
    """
    for name in names:
        lowered = name.strip().lower()
        if lowered in GUI_APP_KEYWORDS:
            return True
        if any(word in GUI_APP_KEYWORDS for word in _WORD_SEPARATORS.split(lowered)):
            return True
    return False


def is_cask(package: ResolvedPackage) -> bool:
    """Decide whether a resolved package installs as a Homebrew cask."""
    item = package.item
    if isinstance(item, CuratedPackage):
        command = item.command_for(Platform.MACOS) or ""
        return "--cask" in command.split()
    if isinstance(item, DiscoveredPackage) and item.repository_tag:
        return item.repository_tag.strip().lower() == "cask"
    guess = looks_like_gui_app(package.identifier, item.name)
    logger.debug("Guessed %s as %s", package.identifier, "cask" if guess else "formula")
    return guess


class MacOsScriptGenerator(ShellScriptGenerator):
    """Generator for Homebrew on macOS.

    Installs Homebrew when it is missing and puts ``/opt/homebrew`` on the
    PATH on Apple Silicon before installing casks, then formulae.
    """

    @property
    def platform(self) -> Platform:
        """Return MACOS as the target platform."""
        return Platform.MACOS

    def bootstrap_lines(self) -> list[str]:
        """Return Homebrew detection and installation."""
        return [
            "# Check if Homebrew is installed",
            "if ! command -v brew &> /dev/null; then",
            "    " + echo("Homebrew is not installed.", "YELLOW"),
            '    echo ""',
            "    " + echo("Homebrew is required to install packages automatically."),
            "    " + echo("Installing Homebrew..."),
            '    echo ""',
            f'    /bin/bash -c "$(curl -fsSL {HOMEBREW_INSTALL_URL})"',
            "",
            "    # Apple Silicon installs to /opt/homebrew, which is not on PATH yet",
            '    if [[ "$(uname -m)" == "arm64" ]]; then',
            "        if ! grep -qs 'brew shellenv' ~/.zprofile; then",
            "            echo 'eval \"$(/opt/homebrew/bin/brew shellenv)\"' >> ~/.zprofile",
            "        fi",
            '        eval "$(/opt/homebrew/bin/brew shellenv)"',
            "    fi",
            "",
            '    echo ""',
            "    " + echo("Homebrew installed successfully!", "GREEN"),
            "else",
            "    " + echo("Homebrew found: $(brew --version | head -n1)", "GREEN"),
            "fi",
            'echo ""',
        ]

    def refresh_lines(self) -> list[str]:
        """Return the best-effort ``brew update`` step."""
        return [
            "# Update Homebrew (best effort)",
            echo("Updating Homebrew...", "CYAN"),
            "if brew update > /dev/null 2>&1; then",
            "    " + echo("Homebrew updated.", "GREEN"),
            "else",
            "    " + echo("Could not update Homebrew, continuing.", "YELLOW"),
            "fi",
            'echo ""',
        ]

    def groups(self, packages: list[ResolvedPackage]) -> list[PackageGroup]:
        """Partition packages into a cask group and a formula group."""
        casks: list[str] = []
        formulae: list[str] = []
        for package in packages:
            if is_cask(package):
                casks.append(package.identifier)
            else:
                formulae.append(package.identifier)

        return [
            PackageGroup(
                array="cask_packages",
                title="Install casks (GUI applications)",
                packages=tuple(casks),
                check_function="is_cask_installed",
                check_command='brew list --cask "$name" &> /dev/null',
                install_function="install_cask",
                install_lines=("brew install --cask $1",),
                empty_note="# No cask packages selected",
            ),
            PackageGroup(
                array="formula_packages",
                title="Install formulae (command-line tools)",
                packages=tuple(formulae),
                check_function="is_formula_installed",
                check_command='brew list --formula "$name" &> /dev/null',
                install_function="install_formula",
                install_lines=("brew install $1",),
                empty_note="# No formula packages selected",
            ),
        ]
