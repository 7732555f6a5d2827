from .errors import (
    KatharsisArgumentError,
    KatharsisDeserializationError,
    KatharsisError,
    KatharsisHttpError,
    KatharsisStatusError,
    RequestStage,
)
from .request import KatharsisRequest, Method, RequestBody
from .response import KatharsisResponse, Status, TypedResponse

__all__ = [
    "KatharsisArgumentError",
    "KatharsisDeserializationError",
    "KatharsisError",
    "KatharsisHttpError",
    "KatharsisRequest",
    "KatharsisResponse",
    "KatharsisStatusError",
    "Method",
    "RequestBody",
    "RequestStage",
    "Status",
    "TypedResponse",
]
