from ._client import KatharsisClient
from ._config import ClientConfig
from ._serializer import Deserializer, JsonSerializer, Serializer
from ._utils import setup_logging
from ._utils.constants import APPLICATION_JSON, APPLICATION_X_WWW_FORM_URLENCODED
from .models import (
    KatharsisArgumentError,
    KatharsisDeserializationError,
    KatharsisError,
    KatharsisHttpError,
    KatharsisRequest,
    KatharsisResponse,
    KatharsisStatusError,
    Method,
    RequestBody,
    RequestStage,
    Status,
    TypedResponse,
)

__all__ = [
    "APPLICATION_JSON",
    "APPLICATION_X_WWW_FORM_URLENCODED",
    "ClientConfig",
    "Deserializer",
    "JsonSerializer",
    "KatharsisArgumentError",
    "KatharsisClient",
    "KatharsisDeserializationError",
    "KatharsisError",
    "KatharsisHttpError",
    "KatharsisRequest",
    "KatharsisResponse",
    "KatharsisStatusError",
    "Method",
    "RequestBody",
    "RequestStage",
    "Serializer",
    "Status",
    "TypedResponse",
    "setup_logging",
]
