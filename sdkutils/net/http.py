from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, MutableMapping, Optional

import requests

from ..config import default_timeout
from ..core.errors import HTTPError
from ..core.jsonparse import dumps_json, parse_json
from ..logging import get_logger
from .options import Options, RequestOptions


logger = get_logger(__name__)


def _is_success(status_code: int) -> bool:
    # requests' Response.ok accepts 3xx; only 2xx counts here.
    return 200 <= status_code < 300


def _send(method: str, verb: str, url: Any, opts: RequestOptions) -> requests.Response:
    target = str(url)
    kwargs = opts.to_kwargs()
    if "timeout" not in kwargs:
        timeout = default_timeout()
        if timeout is not None:
            kwargs["timeout"] = timeout

    logger.debug("%s %s", method, target)
    r = requests.request(method, target, **kwargs)
    if not _is_success(r.status_code):
        logger.warning("%s %s returned %s", method, target, r.status_code)
        raise HTTPError(
            f"{r.status_code} could not {verb} URL {target}",
            status_code=r.status_code,
            url=target,
            method=method,
            response=r,
        )
    return r


def get(url: Any, options: Optional[Options] = None) -> requests.Response:
    """GET ``url`` and return the response if its status is 2xx.

    ``options`` (a RequestOptions or a plain mapping) is passed through to
    ``requests``. The body is left unread for the caller. Transport errors
    from ``requests`` propagate unchanged.
    """

    return _send("GET", "get", url, RequestOptions.coerce(options))


def post(url: Any, options: Options) -> requests.Response:
    """POST ``url`` and return the response if its status is 2xx.

    The method is always POST: a ``method`` in ``options`` is overwritten
    on the caller's object.
    """

    if isinstance(options, MutableMapping):
        options["method"] = "POST"
    opts = RequestOptions.coerce(options)
    opts.method = "POST"
    return _send("POST", "post", url, opts)


def _body(r: requests.Response) -> Any:
    if not r.content:
        return None
    return parse_json(r.content)


def get_json(url: Any, options: Optional[Options] = None) -> Any:
    """GET ``url`` and parse the body with parse_json (None for an empty body)."""

    return _body(get(url, options))


def post_json(url: Any, payload: Any, options: Optional[Options] = None) -> Any:
    """POST ``payload`` as JSON and parse the JSON reply."""

    opts = replace(RequestOptions.coerce(options))
    headers: Dict[str, str] = dict(opts.headers or {})
    if not any(k.lower() == "content-type" for k in headers):
        headers["Content-Type"] = "application/json"
    opts.headers = headers
    opts.data = dumps_json(payload).encode("utf-8")
    opts.json = None
    return _body(post(url, opts))
