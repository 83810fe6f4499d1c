"""
Logging setup for the Balatro solver.
"""

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "BALATRO_SOLVER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger("balatro_solver")


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Set the package log level and attach a stderr handler once.

    `level` wins over the BALATRO_SOLVER_LOG_LEVEL environment variable.
    """
    level_name = (level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    # Handler only if none exists yet
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '[%(asctime)s] %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
