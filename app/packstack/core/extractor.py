"""Identifier extraction from install commands.

Curated catalog entries describe installs as free-form command strings
(e.g. ``winget install --id Google.Chrome -e``). The script generators need
the bare package identifier instead, so this module parses the command with
a small rule per package manager. Discovered packages already carry their
identifier and are returned as-is.

Extraction never raises: an unknown package manager or an unparsable
command yields an empty string, which callers skip.
"""

import logging
import shlex
from dataclasses import dataclass

from packstack.models.package import CuratedPackage, DiscoveredPackage, InstallableItem
from packstack.models.platform import InstallMethod, Platform

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandRule:
    """How to find the package identifier in one package manager's syntax.

    Attributes:
        executables: Program names that accept the install verb.
        verb: Token that follows the program name for installs.
        multi_word: If True, keep every remaining non-flag token as one unit.
        id_flag: Option whose value is the identifier (takes precedence).
    """

    executables: tuple[str, ...]
    verb: str
    multi_word: bool = False
    id_flag: str | None = None


COMMAND_RULES: dict[InstallMethod, CommandRule] = {
    InstallMethod.WINGET: CommandRule(("winget",), "install", id_flag="--id"),
    InstallMethod.BREW: CommandRule(("brew",), "install"),
    InstallMethod.APT: CommandRule(("apt", "apt-get"), "install", multi_word=True),
    InstallMethod.PACMAN: CommandRule(("pacman", "yay", "paru"), "-S", multi_word=True),
    InstallMethod.DNF: CommandRule(("dnf",), "install", multi_word=True),
}


def _tokenize(command: str) -> list[str]:
    """Split a command with shell quoting rules, or return [] if malformed."""
    try:
        return shlex.split(command)
    except ValueError:
        logger.debug("Cannot tokenize install command: %r", command)
        return []


def _arguments_after_verb(tokens: list[str], rule: CommandRule) -> list[str] | None:
    """Return the tokens that follow '<executable> <verb>', or None if absent."""
    for index, token in enumerate(tokens[:-1]):
        if token in rule.executables and tokens[index + 1] == rule.verb:
            return tokens[index + 2 :]
    return None


def _flag_value(arguments: list[str], flag: str) -> str | None:
    """Return the value of ``flag`` given as '--flag X' or '--flag=X'."""
    for index, token in enumerate(arguments):
        if token == flag and index + 1 < len(arguments):
            return arguments[index + 1]
        if token.startswith(f"{flag}="):
            return token.split("=", 1)[1] or None
    return None


def extract_from_command(command: str, method: InstallMethod) -> str:
    """Extract the package identifier from an install command.

    Leading words such as ``sudo`` are ignored, flags (tokens starting with
    ``-``) are stripped, and the first remaining token is the identifier.
    apt, pacman and dnf keep all remaining tokens as one space-joined unit.

    Args:
        command: Install command in the package manager's syntax.
        method: Package manager whose rule applies.

    Returns:
        The identifier, or an empty string if none can be resolved.

    Example:
        >>> extract_from_command("sudo apt install -y ripgrep", InstallMethod.APT)
        'ripgrep'
    """
    rule = COMMAND_RULES.get(method)
    if rule is None:
        return ""

    arguments = _arguments_after_verb(_tokenize(command), rule)
    if arguments is None:
        return ""

    if rule.id_flag is not None:
        value = _flag_value(arguments, rule.id_flag)
        if value:
            return value

    positional = [token for token in arguments if not token.startswith("-")]
    if not positional:
        return ""
    if rule.multi_word:
        return " ".join(positional)
    return positional[0]


def resolve_install_command(item: CuratedPackage, platform: Platform) -> str:
    """Resolve a curated package's command via the distro -> linux chain.

    Args:
        item: Curated package.
        platform: Target platform.

    Returns:
        The install command, or an empty string if none exists.
    """
    return item.command_for(platform) or ""


def extract_identifier(item: InstallableItem, platform: Platform) -> str:
    """Derive the canonical package identifier of an item for a platform.

    Args:
        item: Curated or discovered package.
        platform: Target platform.

    Returns:
        The identifier, or an empty string if the item cannot be installed
        on this platform.
    """
    if isinstance(item, DiscoveredPackage):
        return item.identifier

    command = resolve_install_command(item, platform)
    if not command:
        return ""

    identifier = extract_from_command(command, platform.install_method)
    if not identifier:
        logger.debug(
            "No %s identifier in command for %s: %r",
            platform.install_method.value,
            item.identifier,
            command,
        )
    return identifier
