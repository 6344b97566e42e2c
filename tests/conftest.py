from __future__ import annotations

from typing import Dict, Optional

import pytest
import requests


def build_response(status: int, body: bytes = b"", *, url: str = "https://api.test/", headers: Optional[Dict[str, str]] = None) -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r._content = body
    r.url = url
    r.headers.update(headers or {})
    return r


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture(autouse=True)
def _no_env_timeout(monkeypatch):
    monkeypatch.delenv("SDKUTILS_HTTP_TIMEOUT", raising=False)
