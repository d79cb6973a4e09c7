"""Logging setup for the packstack CLI.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
CLI entry point installs a single Rich handler on the root logger.
"""

import logging

from rich.logging import RichHandler

from packstack.utils.formatting import err_console


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger for a CLI run.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=err_console,
        show_path=verbose,
        show_time=verbose,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
