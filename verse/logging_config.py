"""
Logging configuration for the command-line interface.

The library modules only create loggers with `logging.getLogger(__name__)`;
handlers are set up here, once, by whoever runs the application.
"""

import logging
import sys

_logging_configured = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure console logging for the `verse` namespace.

    Args:
        verbose: Log at DEBUG level instead of WARNING

    Returns:
        The `verse` logger
    """
    global _logging_configured

    logger = logging.getLogger("verse")
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    if not _logging_configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        _logging_configured = True

    return logger
