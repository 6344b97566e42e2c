"""Core errors, the log-and-raise helper and JSON parsing."""

from .errors import (
    SdkError,
    LoggedFailure,
    ParseError,
    HTTPError,
)
from .failure import log_and_throw
from .jsonparse import parse_json, dumps_json

__all__ = [
    # Errors
    "SdkError",
    "LoggedFailure",
    "ParseError",
    "HTTPError",
    # Helpers
    "log_and_throw",
    "parse_json",
    "dumps_json",
]
