"""Logging setup shared by the publisher modules.

Records go through the standard library logging tree under the
``pages_publisher`` logger and are rendered on stderr by Rich.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "pages_publisher"

console = Console(stderr=True)

_handler: RichHandler | None = None


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure the package logger.

    Repeated calls only adjust the level.

    Args:
        verbose: Emit debug and info records when True, warnings and
            errors only otherwise

    Returns:
        The configured package logger
    """
    global _handler

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is None:
        _handler = RichHandler(
            console=console,
            show_path=False,
            rich_tracebacks=True,
        )
        _handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        root.addHandler(_handler)

    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return root


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger below the package logger.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger for the module
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
