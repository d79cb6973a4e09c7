"""Script packaging: file names, MIME types, file output and size totals."""

import logging
import os
from collections.abc import Sequence
from pathlib import Path
from tempfile import NamedTemporaryFile

from packstack.core.dispatcher import generate_script_content
from packstack.generators.base import Clock
from packstack.models.package import InstallableItem
from packstack.models.platform import Platform, parse_platform
from packstack.models.script import GeneratedScript

logger = logging.getLogger(__name__)

SCRIPT_NAMES: dict[Platform, str] = {
    Platform.WINDOWS: "install.ps1",
    Platform.MACOS: "install-macos.sh",
    Platform.UBUNTU: "install-ubuntu.sh",
    Platform.ARCH: "install-arch.sh",
    Platform.DEBIAN: "install-debian.sh",
    Platform.FEDORA: "install-fedora.sh",
    Platform.LINUX: "install.sh",
}

DEFAULT_SCRIPT_NAME = "install.sh"

POWERSHELL_MIME_TYPE = "text/plain"
SHELL_MIME_TYPE = "application/x-sh"


class ScriptWriteError(Exception):
    """Raised when a generated script cannot be written to disk."""


def get_script_name(platform: Platform | str) -> str:
    """Return the script file name for a platform.

    Unknown platform ids get the generic ``install.sh``.
    """
    resolved = parse_platform(platform)
    if resolved is None:
        return DEFAULT_SCRIPT_NAME
    return SCRIPT_NAMES[resolved]


def get_script_extension(platform: Platform | str) -> str:
    """Return the script file extension ('.ps1' for Windows, '.sh' otherwise)."""
    return ".ps1" if parse_platform(platform) == Platform.WINDOWS else ".sh"


def get_mime_type(platform: Platform | str) -> str:
    """Return the MIME type used to deliver the script for a platform."""
    if parse_platform(platform) == Platform.WINDOWS:
        return POWERSHELL_MIME_TYPE
    return SHELL_MIME_TYPE


def build_script(
    items: Sequence[InstallableItem],
    platform: Platform | str,
    clock: Clock | None = None,
) -> GeneratedScript:
    """Generate a script and attach its delivery metadata.

    Args:
        items: Selected items in install order.
        platform: Target platform.
        clock: Timestamp source for the script header.
        directory: Treat ``destination`` as a directory even if it doesn't exist.

    Returns:
        GeneratedScript whose content is exactly generate_script_content()'s output.
    """
    resolved = parse_platform(platform) or Platform.LINUX
    return GeneratedScript(
        platform=resolved,
        filename=get_script_name(platform),
        mime_type=get_mime_type(platform),
        content=generate_script_content(items, platform, clock=clock),
    )


def write_script(script: GeneratedScript, destination: Path, directory: bool = False) -> Path:
    """Write a generated script to disk.

    ``destination`` is a directory (the script's file name is used) when
    ``directory`` is set, when it already exists as a directory, or when it
    has no file suffix; otherwise it is the file path. Missing directories
    are created. The file is written atomically through a temporary file in
    the same directory, and shell scripts are made executable.

    Args:
        script: The generated script.
        destination: Target directory or file path.
        directory: Treat ``destination`` as a directory even if it doesn't exist.

    Returns:
        Path of the written file.

    Raises:
        ScriptWriteError: If the file cannot be written.
    """
    if directory or destination.is_dir() or not destination.suffix:
        path = destination / script.filename
    else:
        path = destination

    tmp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            f.write(script.to_bytes())
        tmp_path.chmod(0o644 if script.is_powershell else 0o755)
        os.replace(str(tmp_path), str(path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ScriptWriteError(f"Failed to write script: {e}") from e

    logger.info("Wrote %s script to %s", script.platform.value, path)
    return path


def download_script(
    items: Sequence[InstallableItem],
    platform: Platform | str,
    destination: Path,
    clock: Clock | None = None,
    directory: bool = False,
) -> Path:
    """Generate a script for a selection and save it to disk.

    Args:
        items: Selected items in install order.
        platform: Target platform.
        destination: Target directory or file path.
        clock: Timestamp source for the script header.
        directory: Treat ``destination`` as a directory even if it does not exist.

    Returns:
        Path of the written file.

    Raises:
        ScriptWriteError: If the file cannot be written.
    """
    return write_script(build_script(items, platform, clock=clock), destination, directory=directory)


def get_total_size(items: Sequence[InstallableItem]) -> float:
    """Sum the size estimates of a selection in MB (unknown sizes count as 0)."""
    return sum(item.size_mb or 0 for item in items)


def _plain_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def format_size(size_mb: float) -> str:
    """Format a size in MB as 'N MB' below 1024 MB, else 'N.N GB'.

    Example:
        >>> format_size(512)
        '512 MB'
        >>> format_size(2048)
        '2.0 GB'
    """
    if size_mb < 1024:
        return f"{_plain_number(size_mb)} MB"
    return f"{size_mb / 1024:.1f} GB"
