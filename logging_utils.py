"""
Logging helpers shared by the app and the summarizer.
One colourised stdout handler per logger; level comes from settings.
"""

import logging
import sys
from typing import Optional

import colorlog

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(name: str, level: Optional[str] = None, colorize: bool = True) -> logging.Logger:
    """
    Set up a logger with a single console handler.

    Args:
        name: Logger name (usually __name__ of the caller)
        level: Logging level name; defaults to LOG_LEVEL from settings
        colorize: Whether to colorize console output

    Example:
        >>> logger = setup_logger("app", level="DEBUG")
        >>> logger.info("Summarizing upload notes.txt")
    """
    if level is None:
        from config import get_settings
        level = get_settings().log_level

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    if colorize:
        formatter = colorlog.ColoredFormatter(
            '%(log_color)s' + LOG_FORMAT,
            datefmt=DATE_FORMAT,
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            }
        )
    else:
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get an existing logger, or create one with default settings."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger = setup_logger(name)
    return logger
