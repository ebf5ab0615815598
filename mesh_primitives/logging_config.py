"""
Logging configuration for the mesh_primitives package.

Modules log through ``logging.getLogger(__name__)``; nothing is printed
until an application calls ``setup_logging``.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "mesh_primitives"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the 'mesh_primitives' logger.

    Generators log facet clamping, isolated vertices and similar
    adjustments at DEBUG; parameter validation logs at WARNING.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write logs to. The file is
            truncated on every call.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # replace earlier handlers, including the import-time NullHandler
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    _attach(logger, logging.StreamHandler(sys.stdout), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode='w', encoding='utf-8'), level)

    logger.debug("Logging initialized.")
    return logger
