"""
Logging infrastructure.

Provides logging utilities for the tracking service.
"""
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name)
        level: Optional level name; defaults to INFO on first setup

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(LOG_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    if level:
        logger.setLevel(level.upper())
    return logger


def configure_logging(level: str = "INFO", fmt: str = LOG_FORMAT) -> None:
    """
    Configure root logging for the API process.

    Args:
        level: Root level name
        fmt: Record format
    """
    logging.basicConfig(level=level.upper(), format=fmt)
