"""Logging configuration for the symbol_opener package."""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "symbol_opener"
LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(log_level: str = "info", stream: TextIO | None = None) -> logging.Logger:
    """Attach one stream handler to the package logger.

    'debug' shows query/retry internals; 'info' shows only found/not-found
    outcomes and errors.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if log_level == "debug" else logging.INFO)
    logger.propagate = False
    return logger
