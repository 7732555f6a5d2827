from ._content import encode_body, media_type, to_form_fields
from ._headers import merge_headers, split_content_type, validate_headers
from ._logs import setup_logging
from ._ssl_context import get_httpx_client_kwargs
from ._url import join_url

__all__ = [
    "encode_body",
    "get_httpx_client_kwargs",
    "join_url",
    "media_type",
    "merge_headers",
    "setup_logging",
    "split_content_type",
    "to_form_fields",
    "validate_headers",
]
