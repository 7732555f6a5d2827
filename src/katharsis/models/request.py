from dataclasses import dataclass, field
from enum import Enum
from logging import getLogger
from typing import Any, Optional, Union

logger = getLogger("katharsis")


class Method(str, Enum):
    """HTTP request methods supported by the client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"

    @classmethod
    def coerce(cls, value: Union["Method", str, None]) -> "Method":
        """Resolve a method from an enum member or a case-insensitive name.

        Unrecognized values fall back to GET.
        """
        if isinstance(value, Method):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        logger.debug(f"Unrecognized method {value!r}, falling back to GET")
        return cls.GET


@dataclass(frozen=True)
class RequestBody:
    """An encoded request body.

    Exactly one of ``text`` (serialized JSON) or ``form`` (flat form fields)
    is set.
    """

    content_type: str
    text: Optional[str] = None
    form: Optional[dict[str, str]] = None

    def httpx_kwargs(self) -> dict[str, Any]:
        if self.form is not None:
            return {"data": self.form}
        return {"content": (self.text or "").encode("utf-8")}


@dataclass(frozen=True)
class KatharsisRequest:
    """Echo of a request as it was sent.

    ``headers`` holds the merged per-call and default headers without
    ``Content-Type``, which is carried by ``content_type`` and the payload.
    """

    uri: str
    method: Method = Method.GET
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    content_type: Optional[str] = None
    payload: Optional[RequestBody] = None

    def wire_headers(self) -> dict[str, str]:
        headers = dict(self.headers)
        if self.payload is not None:
            headers["Content-Type"] = self.payload.content_type
        return headers
