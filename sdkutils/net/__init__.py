"""Networking helpers: status-checked GET/POST wrappers over requests."""

from .http import get, post, get_json, post_json
from .options import RequestOptions

__all__ = ["get", "post", "get_json", "post_json", "RequestOptions"]
