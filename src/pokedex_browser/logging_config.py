"""Logging configuration for the Pokédex browser."""

import sys
from typing import TextIO

from loguru import logger


def configure_logging(*, verbose: bool = False, sink: TextIO | None = None) -> None:
    """Configure loguru; verbose mode adds requests and state transitions."""
    logger.remove()
    if verbose:
        logger.add(sink or sys.stderr, level="DEBUG", format="{level.icon} {name}: {message}")
    else:
        logger.add(sink or sys.stderr, level="INFO", format="{level.icon} {message}")
