"""Detect the platform of the machine packstack runs on."""

import logging
import platform
from pathlib import Path

from packstack.models.platform import Platform

logger = logging.getLogger(__name__)

OS_RELEASE_PATH = Path("/etc/os-release")

# os-release ID / ID_LIKE values mapped to the closest supported distribution
_DISTRO_IDS: dict[str, Platform] = {
    "ubuntu": Platform.UBUNTU,
    "debian": Platform.DEBIAN,
    "arch": Platform.ARCH,
    "fedora": Platform.FEDORA,
}


def parse_os_release(text: str) -> dict[str, str]:
    """Parse os-release KEY=value lines into a dictionary.

    Args:
        text: Content of an os-release file.

    Returns:
        Mapping of keys to unquoted values.
    """
    result: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        result[key.strip()] = value.strip().strip("\"'")
    return result


def distro_from_os_release(fields: dict[str, str]) -> Platform:
    """Map os-release fields to a Linux platform.

    ``ID`` is checked first, then each entry of ``ID_LIKE`` in order, so
    derivatives such as Pop!_OS (``ID_LIKE="ubuntu debian"``) map to Ubuntu.
    """
    candidates = [fields.get("ID", "").lower(), *fields.get("ID_LIKE", "").lower().split()]
    for candidate in candidates:
        if candidate in _DISTRO_IDS:
            return _DISTRO_IDS[candidate]
    return Platform.LINUX


def detect_platform(
    system: str | None = None,
    os_release_path: Path = OS_RELEASE_PATH,
) -> Platform:
    """Detect the current platform.

    Args:
        system: Operating system name as reported by platform.system().
            If None, the running system is queried.
        os_release_path: os-release file consulted on Linux.

    Returns:
        The detected Platform. Unrecognized systems default to WINDOWS.
    """
    system_name = system if system is not None else platform.system()

    if system_name == "Windows":
        return Platform.WINDOWS
    if system_name == "Darwin":
        return Platform.MACOS
    if system_name != "Linux":
        logger.debug("Unrecognized system %r, assuming Windows", system_name)
        return Platform.WINDOWS

    try:
        fields = parse_os_release(os_release_path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.debug("Cannot read %s: %s", os_release_path, e)
        return Platform.LINUX
    return distro_from_os_release(fields)
