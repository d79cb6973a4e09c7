"""CLI package for packstack.

This package contains the Typer application and all subcommands.
"""

from packstack.cli.main import app

__all__ = ["app"]
