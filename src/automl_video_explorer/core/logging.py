"""Logging setup for the explorer."""

import sys

from loguru import logger


def setup_logging(level: str = "WARNING") -> None:
    """Route loguru output to stderr at the given level.

    Standard output is reserved for rendered records, so diagnostics never
    interleave with command output when it is piped.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=level.upper(),
        colorize=True,
        backtrace=False,
        diagnose=False,
    )
    logger.debug(f"Logging initialized with level: {level.upper()}")
