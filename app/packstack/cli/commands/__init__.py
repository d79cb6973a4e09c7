"""CLI commands for packstack.

This package contains all subcommand implementations.
"""

from packstack.cli.commands import catalog, command, config, generate

__all__ = ["catalog", "command", "config", "generate"]
