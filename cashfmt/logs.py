"""Logging configuration for the cashfmt CLI.

Library modules only create loggers with logging.getLogger(__name__); handlers
are installed here, by the CLI.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger with a rich handler on stderr.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    # Clear any existing handlers to prevent duplicates on re-initialization
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)
