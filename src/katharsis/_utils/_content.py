from typing import Any, Optional

from .._serializer import Deserializer, Serializer
from ..models.errors import KatharsisArgumentError, KatharsisDeserializationError
from ..models.request import RequestBody
from .constants import APPLICATION_JSON, APPLICATION_X_WWW_FORM_URLENCODED


def media_type(content_type: Optional[str]) -> str:
    """Return the lower-cased media type without parameters."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def encode_body(
    body: Any,
    content_type: Optional[str],
    serializer: Serializer,
    deserializer: Deserializer,
) -> RequestBody:
    """Encode a request body according to the declared content type.

    Form-url-encoded bodies are serialized, read back as a flat mapping and
    sent as form fields. Every other declared type, known or not, is sent as
    serialized text under the declared type (``application/json`` when none
    is declared).
    """
    if media_type(content_type) == APPLICATION_X_WWW_FORM_URLENCODED:
        return RequestBody(
            content_type=content_type or APPLICATION_X_WWW_FORM_URLENCODED,
            form=to_form_fields(body, serializer, deserializer),
        )

    return RequestBody(
        content_type=content_type or APPLICATION_JSON,
        text=serializer.serialize(body),
    )


def to_form_fields(
    body: Any, serializer: Serializer, deserializer: Deserializer
) -> dict[str, str]:
    serialized = serializer.serialize(body)
    try:
        mapping = deserializer.deserialize(serialized, dict[str, Any])
    except KatharsisDeserializationError as e:
        raise KatharsisArgumentError(
            "body", "Form-url-encoded body must serialize to an object."
        ) from e

    return {key: _form_value(key, value) for key, value in mapping.items()}


def _form_value(key: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        raise KatharsisArgumentError(
            "body",
            f"Form-url-encoded body must be flat, field '{key}' is a "
            f"{type(value).__name__}.",
        )
    return str(value)
