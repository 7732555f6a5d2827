from typing import Mapping, Optional

from ..models.errors import KatharsisArgumentError
from .constants import HEADER_CONTENT_TYPE


def split_content_type(
    headers: Optional[Mapping[str, str]],
) -> tuple[Optional[str], dict[str, str]]:
    """Pull ``Content-Type`` out of a header mapping.

    Returns the declared content type (or ``None``) and the remaining headers.
    Header names are compared case-insensitively.
    """
    content_type = None
    rest: dict[str, str] = {}
    for key, value in (headers or {}).items():
        if key.lower() == HEADER_CONTENT_TYPE.lower():
            content_type = value
            continue
        rest[key] = value
    return content_type, rest


def merge_headers(
    call_headers: Mapping[str, str], default_headers: Mapping[str, str]
) -> dict[str, str]:
    """Apply default headers after per-call headers.

    A default header is skipped when the call already sets the same
    (case-insensitive) key, so per-call values win.
    """
    merged = dict(call_headers)
    present = {key.lower() for key in merged}
    for key, value in default_headers.items():
        if key.lower() not in present:
            merged[key] = value
            present.add(key.lower())
    return merged


def validate_headers(headers: Optional[Mapping[str, str]], argument: str) -> None:
    """Reject header values that are not strings."""
    for key, value in (headers or {}).items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise KatharsisArgumentError(
                argument,
                f"Header '{key}' must map a string to a string, "
                f"got {type(value).__name__}.",
            )
