from enum import Enum
from typing import Any, Optional


class RequestStage(str, Enum):
    """Stages of a single request in which a transport failure can occur."""

    BUILD_REQUEST = "build-request"
    SEND = "send"
    READ_BODY = "read-body"
    STATUS = "status"


class KatharsisError(Exception):
    """Base class for all errors raised or captured by the client."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class KatharsisArgumentError(KatharsisError, ValueError):
    """Raised when a required argument is missing or cannot be used.

    Covers a ``None`` body passed to a serializer, empty content passed to a
    deserializer, and bodies that cannot be flattened into form fields.
    """

    def __init__(self, argument: str, message: Optional[str] = None):
        self.argument = argument
        super().__init__(message or f"Argument '{argument}' must not be empty.")


class KatharsisDeserializationError(KatharsisError):
    """Raised when response content cannot be converted to the requested type."""

    def __init__(self, content: str, target: Any, reason: str):
        self.content = content
        self.target = target
        name = getattr(target, "__name__", None) or repr(target)
        super().__init__(f"Could not deserialize content into {name}: {reason}")


class KatharsisHttpError(KatharsisError):
    """Transport failure captured into ``KatharsisResponse.error``.

    The original exception is kept both as ``cause`` and as ``__cause__``.
    """

    def __init__(
        self,
        stage: RequestStage,
        method: str,
        url: str,
        cause: Optional[BaseException] = None,
        message: Optional[str] = None,
    ):
        self.stage = stage
        self.method = method
        self.url = url
        self.cause = cause
        if message is None:
            message = f"{stage.value} failed for {method} {url}"
            if cause is not None:
                message = f"{message}: {type(cause).__name__}: {cause}"
        super().__init__(message)
        self.__cause__ = cause


class KatharsisStatusError(KatharsisHttpError):
    """Non-2xx response, captured when status errors are enabled on the client."""

    def __init__(self, method: str, url: str, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(
            RequestStage.STATUS,
            method,
            url,
            message=f"{method} {url} returned status {status_code}",
        )
