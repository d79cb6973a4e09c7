"""Generated script model."""

from dataclasses import dataclass

from packstack.models.platform import Platform


@dataclass(frozen=True, slots=True)
class GeneratedScript:
    """A rendered installation script ready for delivery.

    Attributes:
        platform: Platform the script targets.
        filename: Suggested file name (e.g., 'install-arch.sh').
        mime_type: MIME type used when delivering the file.
        content: Complete script text.
    """

    platform: Platform
    filename: str
    mime_type: str
    content: str

    @property
    def is_powershell(self) -> bool:
        """Check if this is a PowerShell script."""
        return self.filename.endswith(".ps1")

    def to_bytes(self) -> bytes:
        """Serialize the script content for download or file output."""
        return self.content.encode("utf-8")
