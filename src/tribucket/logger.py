"""Logging configuration for tribucket.

Modules log through ``logging.getLogger(__name__)``. This module gives their
common parent, the ``tribucket`` logger, its single stdout handler.
"""

import logging
import sys

from tribucket.config import get_log_level

# Parent of every module logger in the package
logger = logging.getLogger("tribucket")


def setup_logger(level: int | None = None) -> None:
    """Attach the stdout handler to the ``tribucket`` logger.

    Args:
        level: Logging level (default: TRIBUCKET_LOG_LEVEL, or INFO when unset)
    """
    if logger.handlers:
        # Already configured
        return

    if level is None:
        level = get_log_level()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("tribucket: [%(name)s] %(message)s"))

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


# Initialize logger on import
setup_logger()
