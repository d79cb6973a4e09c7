"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from packstack.core.packaging import format_size
from packstack.core.theme import get_theme
from packstack.models.package import DiscoveredPackage, InstallableItem


def _detect_color_system() -> str | None:
    """Use truecolor on interactive terminals, otherwise let Rich decide."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_package_table(title: str) -> Table:
    """Create a pre-configured table for displaying a package selection.

    Args:
        title: Table title.

    Returns:
        Rich Table with status, package, identifier, source and size columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("", width=2, justify="center")
    table.add_column("Package", no_wrap=True)
    table.add_column("Identifier", style="info")
    table.add_column("Source", style="muted")
    table.add_column("Size", style="info", justify="right")
    return table


def format_item_row(item: InstallableItem, identifier: str) -> tuple[str, str, str, str, str]:
    """Format a selected item as a table row.

    Items that resolved to an identifier get a filled circle; items that
    will be skipped get an empty circle and a dash.

    Args:
        item: Curated or discovered package.
        identifier: Identifier resolved for the target platform ('' if none).

    Returns:
        Tuple of (icon, name, identifier, source, size) with Rich markup.
    """
    if identifier:
        icon = "[available]●[/]"
        name = f"[available]{escape(item.name)}[/]"
    else:
        icon = "[unavailable]○[/]"
        name = f"[unavailable]{escape(item.name)}[/]"

    if isinstance(item, DiscoveredPackage):
        source_text = item.package_manager.value
    else:
        source_text = "catalog"
    size = format_size(item.size_mb) if item.size_mb is not None else "-"
    return (icon, name, escape(identifier) if identifier else "-", source_text, size)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
