"""Logging setup for the genius_lyrics package and its CLI."""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "genius_lyrics"

SHORT_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

QUIET_LIBRARIES = ("urllib3", "charset_normalizer")


def setup_logging(
    level: str = "INFO", log_file: Optional[Path] = None, verbose: bool = False
) -> logging.Logger:
    """
    Configure the package logger for a CLI run.

    Records go to stderr, never stdout, so printed lyrics stay clean.
    Calling this again replaces the previous handlers.
    """
    for name in QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    formatter = logging.Formatter(VERBOSE_FORMAT if verbose else SHORT_FORMAT)

    handlers: list = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)
