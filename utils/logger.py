"""
utils/logger.py
---------------
Logging setup for the book store. Modules call `get_logger(__name__)`;
the first call installs one stdout handler on the root logger at LOG_LEVEL.
"""

import logging
import sys

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def _configure_root() -> None:
    global _handler
    if _handler is not None:
        return
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root = logging.getLogger()
    level = logging.getLevelName(LOG_LEVEL)
    # unknown names come back as "Level X" strings
    root.setLevel(level if isinstance(level, int) else logging.INFO)
    root.addHandler(_handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for `name`, configuring the root logger on first use."""
    _configure_root()
    return logging.getLogger(name)
