import logging

import colorlog

from logging_utils import get_logger, setup_logger


def test_setup_logger_single_handler():
    logger = setup_logger("tests.single", level="debug")
    logger = setup_logger("tests.single", level="debug")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert isinstance(logger.handlers[0].formatter, colorlog.ColoredFormatter)


def test_setup_logger_plain():
    logger = setup_logger("tests.plain", level="WARNING", colorize=False)
    assert not isinstance(logger.handlers[0].formatter, colorlog.ColoredFormatter)


def test_get_logger_reuses_handlers():
    first = get_logger("tests.reuse")
    second = get_logger("tests.reuse")
    assert first is second
    assert len(second.handlers) == 1
