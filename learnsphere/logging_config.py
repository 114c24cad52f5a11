"""
Loguru sink configuration.

Library modules only do ``from loguru import logger``; entry points call
``configure_logging`` once to replace the default stderr sink.
"""

from __future__ import annotations

import sys

from loguru import logger

CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | <cyan>{name}</cyan> - {message}"


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Replace loguru's default handler with the project sink.

    Args:
        level: Minimum level to emit (DEBUG, INFO, WARNING, ERROR)
        json_logs: Serialize records as JSON lines instead of the console format
    """
    logger.remove()
    if json_logs:
        logger.add(sys.stderr, level=level.upper(), serialize=True)
    else:
        logger.add(sys.stderr, level=level.upper(), format=CONSOLE_FORMAT)
