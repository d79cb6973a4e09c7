"""Platform, package manager and category enumerations.

A platform is the target operating system a script is generated for.
Linux distributions are specializations of the generic ``linux`` platform.
"""

from enum import Enum


class InstallMethod(Enum):
    """Package managers (and other install channels) a command can target."""

    WINGET = "winget"
    CHOCO = "choco"
    BREW = "brew"
    APT = "apt"
    SNAP = "snap"
    FLATPAK = "flatpak"
    PACMAN = "pacman"
    DNF = "dnf"
    DIRECT = "direct"


class Category(Enum):
    """Catalog categories for curated packages."""

    BROWSERS = "browsers"
    MEDIA = "media"
    DEVELOPMENT = "development"
    UTILITIES = "utilities"
    SECURITY = "security"
    COMMUNICATION = "communication"
    DESIGN = "design"
    GAMING = "gaming"

    @property
    def display_name(self) -> str:
        """Return the human-readable category name."""
        return _CATEGORY_NAMES[self]


_CATEGORY_NAMES: dict[Category, str] = {
    Category.BROWSERS: "Web Browsers",
    Category.MEDIA: "Media & Entertainment",
    Category.DEVELOPMENT: "Development Tools",
    Category.UTILITIES: "Utilities",
    Category.SECURITY: "Security & Privacy",
    Category.COMMUNICATION: "Communication",
    Category.DESIGN: "Design & Creative",
    Category.GAMING: "Gaming",
}


class Platform(str, Enum):
    """Target platforms for script generation.

    Inherits from ``str`` so values can be used directly as CLI choices.
    """

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    UBUNTU = "ubuntu"
    ARCH = "arch"
    DEBIAN = "debian"
    FEDORA = "fedora"

    @property
    def is_linux_distro(self) -> bool:
        """Check if this is a specific Linux distribution (not generic linux)."""
        return self in (Platform.UBUNTU, Platform.ARCH, Platform.DEBIAN, Platform.FEDORA)

    @property
    def command_chain(self) -> tuple["Platform", ...]:
        """Return the platforms consulted, in order, when resolving a command.

        Distribution ids fall back to the generic ``linux`` command.
        """
        if self.is_linux_distro:
            return (self, Platform.LINUX)
        return (self,)

    @property
    def install_method(self) -> InstallMethod:
        """Return the native package manager of this platform."""
        return _INSTALL_METHODS[self]

    @property
    def display_name(self) -> str:
        """Return the human-readable platform name."""
        return _DISPLAY_NAMES[self]


_INSTALL_METHODS: dict[Platform, InstallMethod] = {
    Platform.WINDOWS: InstallMethod.WINGET,
    Platform.MACOS: InstallMethod.BREW,
    Platform.LINUX: InstallMethod.APT,
    Platform.UBUNTU: InstallMethod.APT,
    Platform.DEBIAN: InstallMethod.APT,
    Platform.ARCH: InstallMethod.PACMAN,
    Platform.FEDORA: InstallMethod.DNF,
}

_DISPLAY_NAMES: dict[Platform, str] = {
    Platform.WINDOWS: "Windows",
    Platform.MACOS: "macOS",
    Platform.LINUX: "Linux",
    Platform.UBUNTU: "Ubuntu",
    Platform.ARCH: "Arch Linux",
    Platform.DEBIAN: "Debian",
    Platform.FEDORA: "Fedora",
}


def parse_platform(value: "Platform | str") -> Platform | None:
    """Convert a platform id to a Platform, or None if it is not recognized.

    Args:
        value: Platform enum member or platform id string (case-insensitive).

    Returns:
        The matching Platform, or None for unknown ids.
    """
    if isinstance(value, Platform):
        return value
    try:
        return Platform(value.strip().lower())
    except ValueError:
        return None
