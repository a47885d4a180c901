"""Retirement savings projection engine."""

from loguru import logger

# Library code stays quiet until the caller opts in via nestegg.log.configure_logging().
logger.disable("nestegg")

__version__ = "0.1.0"
