from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Generic, Optional, TypeVar

from .errors import KatharsisError
from .request import KatharsisRequest

T = TypeVar("T")


@dataclass(frozen=True)
class Status:
    """Numeric status code with its symbolic name, e.g. ``200 OK``."""

    code: int
    name: str

    @classmethod
    def from_code(cls, code: int) -> "Status":
        try:
            name = HTTPStatus(code).name
        except ValueError:
            name = "UNKNOWN"
        return cls(code=code, name=name)

    @property
    def is_success(self) -> bool:
        return 200 <= self.code < 300

    def __str__(self) -> str:
        return f"{self.code} {self.name}"


@dataclass(frozen=True)
class KatharsisResponse:
    """Uniform result of a single request.

    A transport failure leaves ``content`` empty, ``status`` unset and the
    failure in ``error``; nothing is raised to the caller.
    """

    content: str = ""
    content_bytes: Optional[bytes] = None
    status: Optional[Status] = None
    headers: dict[str, str] = field(default_factory=dict)
    error: Optional[KatharsisError] = None
    request: Optional[KatharsisRequest] = None

    @property
    def ok(self) -> bool:
        return (
            self.error is None and self.status is not None and self.status.is_success
        )

    def raise_for_error(self) -> "KatharsisResponse":
        """Re-raise the captured error, if any. Returns ``self`` otherwise."""
        if self.error is not None:
            raise self.error
        return self


@dataclass(frozen=True)
class TypedResponse(KatharsisResponse, Generic[T]):
    """A response whose content was deserialized into ``value``."""

    value: Optional[T] = None

    @classmethod
    def from_response(
        cls, response: KatharsisResponse, value: Optional[T]
    ) -> "TypedResponse[T]":
        return cls(
            content=response.content,
            content_bytes=response.content_bytes,
            status=response.status,
            headers=response.headers,
            error=response.error,
            request=response.request,
            value=value,
        )
