"""Logging setup for the command line."""

import logging
from typing import Optional

from feedback_galaxy.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once per process.

    Args:
        level: Log level name. Defaults to ``LOG_LEVEL`` from config.
    """
    resolved = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, resolved, logging.WARNING),
        format=LOG_FORMAT,
    )
