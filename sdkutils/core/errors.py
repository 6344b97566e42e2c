from __future__ import annotations

from typing import Any, Optional


class SdkError(Exception):
    """Base error for sdkutils."""

    def __init__(self, message: str, *, context: Optional[dict[str, Any]] = None) -> None:  # noqa: D401
        super().__init__(message)
        self.message = message
        self.context = context or {}


class LoggedFailure(SdkError):
    """Failure raised after the message was written to the error log."""


class ParseError(SdkError):
    """JSON text was not well-formed."""


class HTTPError(SdkError):
    """Response status was outside the 2xx success range."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        url: str,
        method: str,
        response: Any = None,
    ) -> None:
        super().__init__(message, context={"status_code": status_code, "url": url, "method": method})
        self.status_code = status_code
        self.url = url
        self.method = method
        self.response = response
