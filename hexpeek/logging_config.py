"""
Logging Configuration
Sets up the logger for the hexpeek command line tool.
"""
import logging
import sys
from typing import Optional, TextIO


def setup_logging(level: int = logging.WARNING, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configures the 'hexpeek' logger namespace.

    Diagnostics always go to the error stream so stdout carries only dump output.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING)
        stream: Stream for the handler, defaults to sys.stderr
    """
    logger = logging.getLogger("hexpeek")
    logger.setLevel(level)
    logger.propagate = False

    # Avoid duplicate handlers when main() runs more than once in a process
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter('%(name)s: %(levelname)s: %(message)s'))
    logger.addHandler(handler)

    logger.debug("Logging initialized.")
    return logger
