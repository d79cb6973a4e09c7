"""Route a selection to the generator for its platform.

This is the main entry point for script generation.
"""

import logging
from collections.abc import Sequence

from packstack.core.extractor import extract_from_command
from packstack.generators import (
    ArchScriptGenerator,
    DebianScriptGenerator,
    FedoraScriptGenerator,
    MacOsScriptGenerator,
    ScriptGenerator,
    WindowsScriptGenerator,
)
from packstack.generators.base import Clock, ResolvedPackage
from packstack.generators.macos import is_cask
from packstack.models.package import CuratedPackage, DiscoveredPackage, InstallableItem
from packstack.models.platform import Platform, parse_platform

logger = logging.getLogger(__name__)

EMPTY_SELECTION_PLACEHOLDER = "# No apps selected for installation\n"


def get_generator(platform: Platform | str, clock: Clock | None = None) -> ScriptGenerator:
    """Return the generator for a platform.

    Generic ``linux`` and unrecognized platform ids get the Debian-family
    generator.

    Args:
        platform: Platform enum member or platform id string.
        clock: Timestamp source passed to the generator.

    Returns:
        A ScriptGenerator instance.
    """
    resolved = parse_platform(platform)
    if resolved is None:
        logger.warning("Unknown platform %r, using the generic Linux (apt) generator", platform)
        return DebianScriptGenerator(Platform.LINUX, clock=clock)

    if resolved == Platform.WINDOWS:
        return WindowsScriptGenerator(clock=clock)
    if resolved == Platform.MACOS:
        return MacOsScriptGenerator(clock=clock)
    if resolved == Platform.ARCH:
        return ArchScriptGenerator(clock=clock)
    if resolved == Platform.FEDORA:
        return FedoraScriptGenerator(clock=clock)
    # UBUNTU, DEBIAN and generic LINUX
    return DebianScriptGenerator(resolved, clock=clock)


def generate_script_content(
    items: Sequence[InstallableItem],
    platform: Platform | str,
    clock: Clock | None = None,
) -> str:
    """Generate the installation script for a selection.

    Never raises for empty or partially unresolvable selections: an empty
    selection yields a placeholder comment, and items without an identifier
    are left out of the install loop.

    Args:
        items: Selected items in install order.
        platform: Target platform (enum member or id string).
        clock: Timestamp source for the script header.

    Returns:
        Complete script text.
    """
    if not items:
        return EMPTY_SELECTION_PLACEHOLDER
    return get_generator(platform, clock=clock).generate(items)


def generate_command(items: Sequence[InstallableItem], platform: Platform | str) -> str:
    """Join the raw install commands of a selection into one line.

    Curated packages contribute their catalog command (distro, then linux
    fallback). Discovered packages contribute a synthesized command for the
    platform's package manager.

    Args:
        items: Selected items in order.
        platform: Target platform.

    Returns:
        Commands joined with `` && ``, or an empty string if none apply.
    """
    resolved = parse_platform(platform) or Platform.LINUX
    commands: list[str] = []
    for item in items:
        if isinstance(item, CuratedPackage):
            command = item.command_for(resolved)
        else:
            command = _synthesize_command(item, resolved)
        if command:
            commands.append(command)
    return " && ".join(commands)


def _synthesize_command(item: DiscoveredPackage, platform: Platform) -> str:
    """Build an install command for a discovered package."""
    identifier = item.identifier
    if platform == Platform.WINDOWS:
        command = f"winget install --id {identifier} -e"
    elif platform == Platform.MACOS:
        cask = "--cask " if is_cask(ResolvedPackage(item, identifier)) else ""
        command = f"brew install {cask}{identifier}"
    elif platform == Platform.ARCH:
        command = f"sudo pacman -S --needed {identifier}"
    elif platform == Platform.FEDORA:
        command = f"sudo dnf install -y {identifier}"
    else:
        command = f"sudo apt install -y {identifier}"
    # Only hand back commands the extractor would parse back to the identifier
    if extract_from_command(command, platform.install_method) != identifier:
        return ""
    return command
