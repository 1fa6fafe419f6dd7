"""Logger configuration for the week view API."""

import sys

from loguru import logger


def setup_logger(level: str = "INFO") -> None:
    """Replace loguru's default sink with a stderr sink at `level`."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        level=level,
    )
