"""Logging configuration for wg-toggle.

stdout carries the status JSON consumed by the bar, so every handler
configured here writes to stderr or a file.
"""

import logging
import sys

logger = logging.getLogger("wgtoggle")


def setup_logging(
    debug: bool = False, log_file: str | None = None
) -> logging.Logger:
    """Configure logging for the application.

    Args:
        debug: Enable debug level logging on stderr
        log_file: Optional file path for log output

    Returns:
        Configured logger instance
    """
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if debug else logging.WARNING)
    console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a module (e.g. 'awg', 'selection')."""
    return logger.getChild(name)
