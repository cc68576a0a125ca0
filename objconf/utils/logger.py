import logging
import sys
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PACKAGE_LOGGER = "objconf"


def _numeric_level(level: str) -> int:
    numeric_level = getattr(logging, str(level).upper(), None)
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def _file_handler(log_file: str) -> logging.FileHandler:
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    handler = logging.FileHandler(log_file)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def get_logger(name: str, level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Create or retrieve a logger with optional file logging.

    Args:
        name (str): Name of the logger.
        level (str, optional): Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        log_file (str, optional): Path to log file. If None, logs only to console.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:  # Avoid adding duplicate handlers
        logger.setLevel(_numeric_level(level))

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

        if log_file:
            logger.addHandler(_file_handler(log_file))

    return logger


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``objconf`` package logger.

    Library modules log through logging.getLogger(__name__), so their
    records propagate here. Unlike get_logger, every call applies ``level``
    and adds a file handler for ``log_file`` unless one already writes there.
    """
    logger = get_logger(PACKAGE_LOGGER, level=level, log_file=log_file)
    logger.setLevel(_numeric_level(level))

    if log_file:
        target = os.path.abspath(log_file)
        writes_there = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == target
            for h in logger.handlers
        )
        if not writes_there:
            logger.addHandler(_file_handler(log_file))

    return logger
