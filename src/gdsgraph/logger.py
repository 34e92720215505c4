"""Logging setup for the ``gdsgraph`` command."""
from __future__ import annotations

import logging

PACKAGE_LOGGER = "gdsgraph"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Loggers of libraries whose per-request chatter drowns out the load steps.
NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(debug: bool = False) -> logging.Logger:
    """Route package logs to stderr and return the package logger.

    Library loggers stay at WARNING unless ``debug`` is set, so a debug run
    also shows every HTTP request the table source makes.
    """
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)
    return package_logger
