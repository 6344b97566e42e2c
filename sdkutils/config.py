from __future__ import annotations

import os
from typing import Optional


def getenv(key: str, default: Optional[str] = None, *aliases: str) -> Optional[str]:
    """Return first non-empty env var among key and aliases."""

    for k in (key, *aliases):
        v = os.getenv(k)
        if v not in (None, ""):
            return v
    return default


def getenv_float(key: str, default: Optional[float] = None) -> Optional[float]:
    v = getenv(key)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError as e:
        raise ValueError(f"{key} must be a number, got {v!r}") from e


def default_timeout() -> Optional[float]:
    """Timeout applied to requests whose options do not set one.

    None (the default) leaves the transport without a timeout.
    """

    return getenv_float("SDKUTILS_HTTP_TIMEOUT")
