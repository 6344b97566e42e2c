from __future__ import annotations

from typing import NoReturn

from .errors import LoggedFailure
from ..logging import get_logger


logger = get_logger("sdkutils")


def log_and_throw(message: str) -> NoReturn:
    """Write ``message`` to the error log, then raise it as a LoggedFailure."""

    logger.error(message)
    raise LoggedFailure(message)
