"""Shared logger for the calculator application."""
import logging
import sys
from typing import Union


LOGGER_NAME = "button_calculator"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _build_logger() -> logging.Logger:
    """
    Create the package logger with a single stderr handler.

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(LOGGER_NAME)
    # Module may be re-imported by tooling, never stack handlers
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
    log.setLevel(logging.INFO)
    return log


def set_log_level(level: Union[int, str]) -> None:
    """
    Change the verbosity of the package logger.

    :param int|str level: Logging level, e.g. logging.DEBUG or "DEBUG"
    """
    logger.setLevel(level)


logger: logging.Logger = _build_logger()
