"""Per-platform installation script generators.

This module provides the abstract generator interface and one concrete
generator per package manager (winget, Homebrew, apt, pacman, dnf).
"""

from packstack.generators.arch import ArchScriptGenerator
from packstack.generators.base import ResolvedPackage, ScriptGenerator
from packstack.generators.debian import DebianScriptGenerator
from packstack.generators.fedora import FedoraScriptGenerator
from packstack.generators.macos import MacOsScriptGenerator
from packstack.generators.shell import PackageGroup, ShellScriptGenerator
from packstack.generators.windows import WindowsScriptGenerator

__all__ = [
    "ArchScriptGenerator",
    "DebianScriptGenerator",
    "FedoraScriptGenerator",
    "MacOsScriptGenerator",
    "PackageGroup",
    "ResolvedPackage",
    "ScriptGenerator",
    "ShellScriptGenerator",
    "WindowsScriptGenerator",
]
