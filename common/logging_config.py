"""
Logging Configuration for the Projection Engine.

Projection construction is the only stage with anything worth reporting:
which catalog entries were applied, which inputs were recorded but ignored
(grid-shift datums, unknown unit names) and the constants each kernel
derived. Per-call forward/inverse failures are raised, never logged.
"""

import logging
import sys


LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger configured for the projection engine.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int
        Logging level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
