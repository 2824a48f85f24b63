"""Logging setup for gitwok.

Modules get their logger through get_logger; nothing is printed until the CLI
calls configure_logging. Levels map to the prefixes users see:
DEBUG -> [Verbose], INFO -> [Info], WARNING -> [Warn], ERROR -> [Error].
"""

import logging
import sys
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "gitwok"

_LEVEL_PREFIXES = {
    logging.DEBUG: "Verbose",
    logging.INFO: "Info",
    logging.WARNING: "Warn",
    logging.ERROR: "Error",
    logging.CRITICAL: "Error",
}


class PrefixFormatter(logging.Formatter):
    """Format records as "[Level]: message"."""

    def format(self, record: logging.LogRecord) -> str:
        prefix = _LEVEL_PREFIXES.get(record.levelno, record.levelname.title())
        return f"[{prefix}]: {record.getMessage()}"


def get_logger(name: str) -> logging.Logger:
    """Get a module logger under the gitwok namespace.

    Args:
        name: Usually the module's __name__.

    Returns:
        The logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        # Silent until configure_logging attaches a real handler
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name)


def configure_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a stderr handler to the gitwok logger.

    Args:
        verbose: Show debug (verbose) messages.
        stream: Output stream. Defaults to stderr.

    Returns:
        The configured gitwok logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(PrefixFormatter())
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    return root
