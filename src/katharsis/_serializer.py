import json
from functools import lru_cache
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import PydanticUserError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from .models.errors import KatharsisArgumentError, KatharsisDeserializationError

T = TypeVar("T")


@runtime_checkable
class Serializer(Protocol):
    """Turns a request body into its textual wire form."""

    def serialize(self, body: Any) -> str: ...


@runtime_checkable
class Deserializer(Protocol):
    """Turns response content back into a typed value."""

    def deserialize(self, content: str, type_: Any = Any) -> Any: ...


class JsonSerializer:
    """JSON implementation of both the serializer and deserializer capability.

    Bodies are converted with pydantic, so models, dataclasses, enums and
    datetimes serialize the same way they would in a pydantic payload.
    Output is compact: ``{"name": "Warsaw"}`` becomes ``{"name":"Warsaw"}``.
    """

    def serialize(self, body: Any) -> str:
        if body is None:
            raise KatharsisArgumentError("body")

        try:
            return json.dumps(
                to_jsonable_python(body, by_alias=True),
                separators=(",", ":"),
                ensure_ascii=False,
            )
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise KatharsisArgumentError(
                "body", f"Body of type {type(body).__name__} is not serializable: {e}"
            ) from e

    def deserialize(self, content: str, type_: Any = Any) -> Any:
        if content is None or not content.strip():
            raise KatharsisArgumentError("content")

        try:
            return _type_adapter(type_).validate_json(content)
        except (ValidationError, PydanticUserError) as e:
            raise KatharsisDeserializationError(content, type_, str(e)) from e


@lru_cache(maxsize=128)
def _type_adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)
