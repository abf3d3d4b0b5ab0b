"""Logging configuration for the application."""
import logging
from typing import Union

from pagepick.config import LOG_FORMAT, LOG_LEVEL

_HANDLER_NAME = "pagepick-console"


def setup_logging(log_level: Union[int, str] = LOG_LEVEL) -> None:
    """
    Install a console handler on the root logger.

    Calling it again only updates the level.

    Args:
        log_level: Level as an int or a name like "DEBUG"
    """
    if isinstance(log_level, str):
        log_level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
