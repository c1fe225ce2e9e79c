import logging
import sys

from sales_analytics.config import settings

LOGGER_NAME = "sales_analytics"

_configured = False


def _configure(level: str) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers
    logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(console_handler)
    logger.propagate = False
    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger under the package logger, configuring it on first use"""
    global _configured
    if not _configured:
        _configure(settings.LOG_LEVEL)
        _configured = True
    return logging.getLogger(name)
