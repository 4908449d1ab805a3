from __future__ import annotations

"""Loguru setup for the minigrep command."""

import sys

from loguru import logger

__all__ = ["setup_logger"]

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}:{function}:{line}</cyan> - <level>{message}</level>"


def setup_logger(verbose: bool = False):
    """Route loguru output to stderr.

    Args:
        verbose: emit debug records when true, otherwise only warnings and up.

    Returns:
        The configured ``logger``.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format=LOG_FORMAT,
    )
    return logger
