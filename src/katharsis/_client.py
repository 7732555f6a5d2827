from logging import getLogger
from typing import Any, Optional, TypeVar, Union

from httpx import AsyncClient, Client, InvalidURL, Request, Response

from ._config import ClientConfig
from ._serializer import Deserializer, JsonSerializer, Serializer
from ._utils import (
    encode_body,
    get_httpx_client_kwargs,
    join_url,
    merge_headers,
    setup_logging,
    split_content_type,
    validate_headers,
)
from ._utils.constants import LOGGER_NAME
from .models import (
    KatharsisHttpError,
    KatharsisRequest,
    KatharsisResponse,
    KatharsisStatusError,
    Method,
    RequestStage,
    Status,
    TypedResponse,
)

T = TypeVar("T")

MethodLike = Union[Method, str]
HeaderMap = Optional[dict[str, str]]


class KatharsisClient:
    """HTTP client holding a base address, default headers and a serializer.

    Every call opens a transport, sends exactly one request, reads the body
    and closes the transport again. Transport failures never raise: they are
    returned in ``KatharsisResponse.error``. Serialization and
    deserialization problems do raise, since they are caller mistakes.

    Examples:
        ```python
        from katharsis import KatharsisClient

        client = KatharsisClient("https://api.example.test/v1", {"key": token})
        response = client.get("current.json?q=Warsaw")
        if response.error is None:
            print(response.status, response.content)
        ```
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        headers: HeaderMap = None,
        serializer: Optional[Serializer] = None,
        *,
        deserializer: Optional[Deserializer] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config.model_copy(deep=True) if config else ClientConfig()

        if base_url is not None:
            self._config.base_url = base_url
        if headers is not None:
            self._config.headers = headers

        self.serializer: Serializer = (
            serializer if serializer is not None else JsonSerializer()
        )
        if deserializer is None:
            deserializer = (
                self.serializer
                if isinstance(self.serializer, Deserializer)
                else JsonSerializer()
            )
        self.deserializer: Deserializer = deserializer

        if self._config.debug:
            setup_logging(debug=True)

        self._client_kwargs = get_httpx_client_kwargs()

        self._logger.debug(f"BASE URL: {self.base_url!r}")
        self._logger.debug(f"HEADERS: {sorted(self.headers)}")

    @classmethod
    def from_env(
        cls,
        serializer: Optional[Serializer] = None,
        **overrides: Any,
    ) -> "KatharsisClient":
        """Create a client configured from ``KATHARSIS_*`` environment variables."""
        return cls(serializer=serializer, config=ClientConfig.from_env(**overrides))

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @base_url.setter
    def base_url(self, value: Optional[str]) -> None:
        self._config.base_url = value  # type: ignore[assignment]

    @property
    def headers(self) -> dict[str, str]:
        return self._config.headers

    @headers.setter
    def headers(self, value: HeaderMap) -> None:
        self._config.headers = value  # type: ignore[assignment]

    def request(
        self,
        resource: str,
        method: MethodLike = Method.GET,
        body: Any = None,
        headers: HeaderMap = None,
    ) -> KatharsisResponse:
        """Send a single request and return its response.

        Args:
            resource (str): Path appended to the base URL, or an absolute URL.
            method (Method | str): HTTP method. Unrecognized names fall back to GET.
            body (Any): Optional body. Serialized as JSON unless the declared
                ``Content-Type`` is ``application/x-www-form-urlencoded``, in
                which case it is sent as form fields.
            headers (Optional[dict[str, str]]): Per-call headers. Default headers
                are added for keys not set here. ``Content-Type`` only selects
                the body encoding.

        Returns:
            KatharsisResponse: Content, raw bytes, status and the sent request.
                On a transport failure ``error`` holds a ``KatharsisHttpError``
                and ``content`` is empty.

        Raises:
            KatharsisArgumentError: If the body cannot be serialized or
                flattened into form fields.
        """
        spec = self._request_spec(resource, method, body, headers)
        self._log_request(spec)

        stage = RequestStage.BUILD_REQUEST
        try:
            with Client(**self._transport_kwargs()) as client:
                http_request = self._build_request(client, spec)

                stage = RequestStage.SEND
                response = client.send(http_request, stream=True)
                try:
                    stage = RequestStage.READ_BODY
                    response.read()
                finally:
                    response.close()
        except Exception as e:
            return self._failed_response(spec, stage, e)

        return self._response(spec, response)

    async def request_async(
        self,
        resource: str,
        method: MethodLike = Method.GET,
        body: Any = None,
        headers: HeaderMap = None,
    ) -> KatharsisResponse:
        """Asynchronously send a single request and return its response.

        Same contract as :meth:`request`.
        """
        spec = self._request_spec(resource, method, body, headers)
        self._log_request(spec)

        stage = RequestStage.BUILD_REQUEST
        try:
            async with AsyncClient(**self._transport_kwargs()) as client:
                http_request = self._build_request(client, spec)

                stage = RequestStage.SEND
                response = await client.send(http_request, stream=True)
                try:
                    stage = RequestStage.READ_BODY
                    await response.aread()
                finally:
                    await response.aclose()
        except Exception as e:
            return self._failed_response(spec, stage, e)

        return self._response(spec, response)

    def request_as(
        self,
        type_: type[T],
        resource: str,
        method: MethodLike = Method.GET,
        body: Any = None,
        headers: HeaderMap = None,
    ) -> TypedResponse[T]:
        """Send a request and deserialize its content into ``type_``.

        If the call captured an error, nothing is deserialized and ``value``
        is ``None``.

        Raises:
            KatharsisArgumentError: If the content is empty.
            KatharsisDeserializationError: If the content does not match ``type_``.
        """
        response = self.request(resource, method, body, headers)
        return self._typed_response(response, type_)

    async def request_as_async(
        self,
        type_: type[T],
        resource: str,
        method: MethodLike = Method.GET,
        body: Any = None,
        headers: HeaderMap = None,
    ) -> TypedResponse[T]:
        """Asynchronously send a request and deserialize its content into ``type_``."""
        response = await self.request_async(resource, method, body, headers)
        return self._typed_response(response, type_)

    def get(
        self, resource: str, body: Any = None, headers: HeaderMap = None
    ) -> KatharsisResponse:
        return self.request(resource, Method.GET, body, headers)

    async def get_async(
        self, resource: str, body: Any = None, headers: HeaderMap = None
    ) -> KatharsisResponse:
        return await self.request_async(resource, Method.GET, body, headers)

    def get_as(
        self, type_: type[T], resource: str, headers: HeaderMap = None
    ) -> TypedResponse[T]:
        return self.request_as(type_, resource, Method.GET, None, headers)

    async def get_as_async(
        self, type_: type[T], resource: str, headers: HeaderMap = None
    ) -> TypedResponse[T]:
        return await self.request_as_async(type_, resource, Method.GET, None, headers)

    def post(
        self, resource: str, body: Any = None, headers: HeaderMap = None
    ) -> KatharsisResponse:
        return self.request(resource, Method.POST, body, headers)

    async def post_async(
        self, resource: str, body: Any = None, headers: HeaderMap = None
    ) -> KatharsisResponse:
        return await self.request_async(resource, Method.POST, body, headers)

    def put(
        self, resource: str, body: Any = None, headers: HeaderMap = None
    ) -> KatharsisResponse:
        return self.request(resource, Method.PUT, body, headers)

    async def put_async(
        self, resource: str, body: Any = None, headers: HeaderMap = None
    ) -> KatharsisResponse:
        return await self.request_async(resource, Method.PUT, body, headers)

    def delete(
        self, resource: str, body: Any = None, headers: HeaderMap = None
    ) -> KatharsisResponse:
        return self.request(resource, Method.DELETE, body, headers)

    async def delete_async(
        self, resource: str, body: Any = None, headers: HeaderMap = None
    ) -> KatharsisResponse:
        return await self.request_async(resource, Method.DELETE, body, headers)

    def patch(
        self, resource: str, body: Any = None, headers: HeaderMap = None
    ) -> KatharsisResponse:
        return self.request(resource, Method.PATCH, body, headers)

    async def patch_async(
        self, resource: str, body: Any = None, headers: HeaderMap = None
    ) -> KatharsisResponse:
        return await self.request_async(resource, Method.PATCH, body, headers)

    def _request_spec(
        self,
        resource: str,
        method: MethodLike,
        body: Any,
        headers: HeaderMap,
    ) -> KatharsisRequest:
        validate_headers(headers, "headers")
        call_content_type, call_headers = split_content_type(headers)
        default_content_type, default_headers = split_content_type(self.headers)
        content_type = call_content_type or default_content_type

        payload = None
        if body is not None:
            payload = encode_body(
                body, content_type, self.serializer, self.deserializer
            )

        return KatharsisRequest(
            uri=join_url(self.base_url, resource),
            method=Method.coerce(method),
            body=body,
            headers=merge_headers(call_headers, default_headers),
            content_type=content_type,
            payload=payload,
        )

    def _transport_kwargs(self) -> dict[str, Any]:
        return {
            **self._client_kwargs,
            "follow_redirects": self._config.follow_redirects,
        }

    def _build_request(
        self, client: Union[Client, AsyncClient], spec: KatharsisRequest
    ) -> Request:
        kwargs: dict[str, Any] = {"headers": spec.wire_headers()}
        if spec.payload is not None:
            kwargs.update(spec.payload.httpx_kwargs())

        http_request = client.build_request(spec.method.value, spec.uri, **kwargs)
        if not http_request.url.is_absolute_url:
            raise InvalidURL(f"Request URL must be absolute, got {spec.uri!r}")
        return http_request

    def _log_request(self, spec: KatharsisRequest) -> None:
        self._logger.debug(f"Request: {spec.method.value} {spec.uri}")
        self._logger.debug(f"HEADERS: {sorted(spec.headers)}")
        if spec.payload is not None:
            self._logger.debug(f"CONTENT-TYPE: {spec.payload.content_type}")

    def _response(
        self, spec: KatharsisRequest, response: Response
    ) -> KatharsisResponse:
        status = Status.from_code(response.status_code)
        self._logger.debug(f"Response: {status} for {spec.method.value} {spec.uri}")

        error = None
        if self._config.capture_status_errors and not status.is_success:
            error = KatharsisStatusError(
                spec.method.value, spec.uri, response.status_code, response.text
            )
            self._logger.warning(error.message)

        return KatharsisResponse(
            content=response.text,
            content_bytes=response.content,
            status=status,
            headers=dict(response.headers),
            error=error,
            request=spec,
        )

    def _failed_response(
        self, spec: KatharsisRequest, stage: RequestStage, exc: Exception
    ) -> KatharsisResponse:
        error = KatharsisHttpError(stage, spec.method.value, spec.uri, cause=exc)
        self._logger.warning(error.message)
        return KatharsisResponse(error=error, request=spec)

    def _typed_response(
        self, response: KatharsisResponse, type_: type[T]
    ) -> TypedResponse[T]:
        if response.error is not None:
            return TypedResponse.from_response(response, None)

        value = self.deserializer.deserialize(response.content, type_)
        return TypedResponse.from_response(response, value)
