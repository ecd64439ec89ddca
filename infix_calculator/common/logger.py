"""Package-wide logger shared by the engine, keypad and batch modules."""
import logging
import os
from typing import Optional, Union

LOGGER_NAME = "infix_calculator"
LOG_LEVEL_ENV = "INFIX_CALC_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(processName)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level.

    The level falls back to the ``INFIX_CALC_LOG_LEVEL`` environment variable,
    then to ``WARNING``. Calling this more than once replaces the handler
    instead of stacking a new one.

    :param level: Level name (``"DEBUG"``) or numeric level

    :return: The configured package logger
    :rtype: logging.Logger
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        level = level.upper()

    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
