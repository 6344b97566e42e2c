from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional, Union


@dataclass
class RequestOptions:
    """Per-request configuration handed to ``requests.request`` as-is.

    Only fields that are set (not None) are forwarded, so the transport's
    own defaults apply to everything left out. ``extras`` carries any other
    keyword ``requests.request`` accepts.
    """

    method: Optional[str] = None
    headers: Optional[Dict[str, str]] = None
    params: Optional[Any] = None
    data: Optional[Any] = None
    json: Optional[Any] = None
    timeout: Optional[Any] = None
    auth: Optional[Any] = None
    cookies: Optional[Any] = None
    allow_redirects: Optional[bool] = None
    stream: Optional[bool] = None
    verify: Optional[Union[bool, str]] = None
    cert: Optional[Any] = None
    proxies: Optional[Dict[str, str]] = None
    extras: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def coerce(cls, value: Union["RequestOptions", Mapping[str, Any], None]) -> "RequestOptions":
        if value is None:
            return cls()
        if isinstance(value, RequestOptions):
            return value
        known = {f.name for f in fields(cls)} - {"extras"}
        kwargs: Dict[str, Any] = {}
        extras: Dict[str, Any] = dict(value.get("extras") or {})
        for key, val in value.items():
            if key == "extras":
                continue
            if key in known:
                kwargs[key] = val
            else:
                extras[key] = val
        return cls(extras=extras, **kwargs)

    def to_kwargs(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            if f.name in ("method", "extras"):
                continue
            val = getattr(self, f.name)
            if val is not None:
                out[f.name] = val
        # method is chosen by the caller of requests.request, never by extras
        out.update({k: v for k, v in self.extras.items() if k != "method"})
        return out


Options = Union[RequestOptions, Mapping[str, Any]]
