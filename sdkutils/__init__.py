"""
sdkutils: small SDK conveniences.

- `log_and_throw` writes an error to the log and raises it
- `parse_json` parses JSON keeping every integer exact
- `get` / `post` wrap requests with 2xx status checking
- Errors live in `sdkutils.core.errors`

Environment variables are loaded from a .env file via python-dotenv.
"""

from __future__ import annotations

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True))

from .core.errors import SdkError, LoggedFailure, ParseError, HTTPError  # noqa: E402
from .core.failure import log_and_throw  # noqa: E402
from .core.jsonparse import parse_json, dumps_json  # noqa: E402
from .net.http import get, post, get_json, post_json  # noqa: E402
from .net.options import RequestOptions  # noqa: E402

__all__ = [
    "log_and_throw",
    "parse_json",
    "dumps_json",
    "get",
    "post",
    "get_json",
    "post_json",
    "RequestOptions",
    # Errors
    "SdkError",
    "LoggedFailure",
    "ParseError",
    "HTTPError",
]
