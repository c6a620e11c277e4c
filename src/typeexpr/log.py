"""Logging configuration for the typeexpr package logger."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "typeexpr"


def setup_logger(*, verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """
    Configure and return the package logger.

    Lines look like `[2024-01-01T12:00:00] message`.

    Args:
        verbose: If True, log debug output (type definitions, resets). Otherwise warnings and errors only.
        stream: Where to write. Defaults to stderr.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Drop handlers from earlier calls, keep the package NullHandler.
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    formatter = logging.Formatter(fmt="[%(asctime)s] %(message)s", datefmt="%Y-%m-%dT%H:%M:%S")
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
