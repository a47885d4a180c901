"""Logging setup for applications embedding the engine."""

import sys
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Route nestegg log records to stderr and, optionally, a rotating file."""
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)
    if log_file:
        logger.add(log_file, format=FILE_FORMAT, level=level, rotation="10 MB")

    logger.enable("nestegg")
    logger.debug(f"Logging initialized at {level}" + (f", file: {log_file}" if log_file else ""))
