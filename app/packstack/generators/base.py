"""Abstract base class for script generators.

This module defines the ScriptGenerator interface that every per-platform
generator implements, plus the shared identifier resolution step.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from packstack.core.extractor import extract_identifier
from packstack.generators.builder import ScriptBuilder, comment_text
from packstack.models.package import InstallableItem
from packstack.models.platform import Platform

logger = logging.getLogger(__name__)

# Callable returning the generation timestamp
Clock = Callable[[], datetime]

BRAND = "PackStack"


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class ResolvedPackage:
    """An item paired with the identifier it resolved to.

    Attributes:
        item: The selected item.
        identifier: Non-empty package identifier for the target platform.
    """

    item: InstallableItem
    identifier: str


class ScriptGenerator(ABC):
    """Abstract base class for all script generators.

    A generator turns a list of selected items into the complete text of an
    installation script for one platform. Generation is pure apart from the
    timestamp line, which comes from the injectable clock.

    Example:
        >>> generator = FedoraScriptGenerator()
        >>> script = generator.generate([git_package])
        >>> script.startswith("#!/usr/bin/env bash")
        True
    """

    def __init__(self, clock: Clock | None = None) -> None:
        """Initialize the generator.

        Args:
            clock: Returns the timestamp embedded in the script header.
                Defaults to the current UTC time.
        """
        self._clock = clock or _utc_now

    @property
    @abstractmethod
    def platform(self) -> Platform:
        """Return the platform this generator targets."""

    @property
    def display_name(self) -> str:
        """Return the platform name shown in the script banner."""
        return self.platform.display_name

    @abstractmethod
    def build(
        self,
        builder: ScriptBuilder,
        packages: list[ResolvedPackage],
        skipped: list[InstallableItem],
    ) -> None:
        """Write the script sections into the builder.

        Args:
            builder: Builder receiving the script sections in order.
            packages: Items with a resolved identifier, in selection order.
            skipped: Items without an identifier for this platform.
        """

    def timestamp(self) -> str:
        """Return the ISO 8601 generation timestamp."""
        return self._clock().isoformat()

    def resolve(
        self, items: Sequence[InstallableItem]
    ) -> tuple[list[ResolvedPackage], list[InstallableItem]]:
        """Resolve identifiers for all items.

        Args:
            items: Selected items in order.

        Returns:
            Tuple of (resolved packages, skipped items).
        """
        resolved: list[ResolvedPackage] = []
        skipped: list[InstallableItem] = []
        for item in items:
            identifier = extract_identifier(item, self.platform)
            if identifier:
                resolved.append(ResolvedPackage(item=item, identifier=identifier))
            else:
                skipped.append(item)
        return resolved, skipped

    def generate(self, items: Sequence[InstallableItem]) -> str:
        """Generate the complete script text.

        Args:
            items: Selected items in order.

        Returns:
            Script text ending with a newline.
        """
        packages, skipped = self.resolve(items)
        if skipped:
            logger.info(
                "Skipping %d item(s) without a %s install command: %s",
                len(skipped),
                self.platform.value,
                ", ".join(item.identifier for item in skipped),
            )
        logger.debug(
            "Generating %s script for %d package(s)", self.platform.value, len(packages)
        )

        builder = ScriptBuilder()
        self.build(builder, packages, skipped)
        return builder.render()

    def header_comments(self, skipped: list[InstallableItem]) -> list[str]:
        """Return the comment lines that open every script."""
        lines = [
            f"# {BRAND} Installation Script for {self.display_name}",
            f"# Generated on {self.timestamp()}",
            "# This script is idempotent and safe to run multiple times",
        ]
        if skipped:
            lines.append("#")
            lines.append(f"# Skipped (no {self.display_name} install command):")
            lines.extend(f"#   - {comment_text(item.name)}" for item in skipped)
        return lines
