# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

from taskprism.configuration import APP_NAME

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a rich handler to the package logger.

    Diagnostics go to stderr so that table output on stdout stays clean.
    Calling this again only adjusts the level.
    """
    package_logger = logging.getLogger(APP_NAME)
    package_logger.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)
    return package_logger
