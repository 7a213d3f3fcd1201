from __future__ import annotations

import logging
import sys
from typing import Any, Optional, Protocol, TextIO

__all__ = ['LoggerPort', 'PACKAGE_LOGGER_NAME', 'enable_console_logging']

PACKAGE_LOGGER_NAME = 'jsonapi_deserializable'

LOG_FORMAT = '%(asctime)s %(levelname)s -- %(name)s: %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggerPort(Protocol):
    """
    Anything accepting informational log messages, e.g. a logging.Logger.
    """
    def info(self, msg: str, *args: Any) -> None:
        ...


def enable_console_logging(level: int = logging.DEBUG, stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Send the package log records to a stream.

    :param level: Level for the package logger (default DEBUG)
    :param stream: Output stream (default stdout)
    :return: The installed handler, so it can be removed again
    """
    handler = logging.StreamHandler(sys.stdout if stream is None else stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
