"""Logging helpers; the client logs through the ``OdooJsonRpc`` logger."""

import logging
import sys
from typing import IO, Optional, Union


LOGGER_NAME = "OdooJsonRpc"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(name: str = LOGGER_NAME, level: Union[str, int] = "INFO",
                 stream: Optional[IO[str]] = None) -> logging.Logger:
    """
    Attach a console handler to the client logger.

    Calling it again returns the already configured logger unchanged, so a
    host application can call it from several entry points.

    Args:
        name: Logger name
        level: Level name (``"DEBUG"``, ``"INFO"``, ...) or numeric level;
            unknown names fall back to INFO
        stream: Destination of log records (stderr by default)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(_resolve_level(level))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(logger.level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the named logger, or the client logger when no name is given."""
    return logging.getLogger(name or LOGGER_NAME)
