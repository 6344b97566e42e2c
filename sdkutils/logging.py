from __future__ import annotations

import logging
import sys
from typing import Union

from .config import getenv


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: Union[int, str, None] = None) -> int:
    """Level from the argument, else SDKUTILS_LOG_LEVEL / LOG_LEVEL, else INFO.

    Unknown names fall back to INFO.
    """

    if isinstance(level, int):
        return level
    name = level or getenv("SDKUTILS_LOG_LEVEL", "INFO", "LOG_LEVEL") or "INFO"
    resolved = logging.getLevelName(name.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str, *, level: Union[int, str, None] = None) -> logging.Logger:
    """Return the logger for ``name``, attaching a stderr handler on first use.

    ERROR carries log_and_throw messages, WARNING rejected HTTP statuses,
    DEBUG outgoing requests.
    """

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    resolved = resolve_level(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.setLevel(resolved)
    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
