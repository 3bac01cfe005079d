"""
Centralized logging configuration.
"""

import logging
import sys


LOG_FORMAT = "%(asctime)s [%(funcName)s] %(message)s"


def setup_logging(level: int | str = logging.INFO) -> None:
    """Configure application-wide logging.

    Every line carries the name of the function that emitted it.
    """
    logging.basicConfig(
        format=LOG_FORMAT,
        level=level,
        stream=sys.stderr,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)
