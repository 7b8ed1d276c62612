"""Logging setup for the summit_pathfinder command line."""
import logging
import sys

from summit_pathfinder.config import DEFAULT_LOG_LEVEL, LOG_FORMAT


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Send package log records to stderr at `level`.

    stdout is reserved for the answers, so the handler writes to stderr.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    root_logger.addHandler(console_handler)
