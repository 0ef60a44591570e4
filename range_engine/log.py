"""
Logging setup.

Diagnostics go to stderr through loguru so stdout only carries results.
"""

import sys

from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> | {message}"


def configure_logging(verbose: bool = False, sink=None) -> None:
    """
    Replace loguru's default handler with a single stderr sink.

    Args:
        verbose: Emit DEBUG records (merged ranges etc.) when True
        sink: Alternative sink, defaults to sys.stderr
    """
    logger.remove()
    logger.add(
        sink if sink is not None else sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format=LOG_FORMAT,
        colorize=False,
    )
