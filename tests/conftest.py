import logging
from typing import Generator

import pytest

from katharsis import KatharsisClient
from katharsis._utils.constants import ENV_BASE_URL, ENV_CAPTURE_STATUS_ERRORS, ENV_DEBUG


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv(ENV_BASE_URL, raising=False)
    monkeypatch.delenv(ENV_CAPTURE_STATUS_ERRORS, raising=False)
    monkeypatch.delenv(ENV_DEBUG, raising=False)


@pytest.fixture(autouse=True)
def reset_logger() -> Generator[None, None, None]:
    logger = logging.getLogger("katharsis")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def base_url() -> str:
    return "https://example.test"


@pytest.fixture
def default_headers() -> dict[str, str]:
    return {"key": "secret-token", "Accept": "application/json"}


@pytest.fixture
def client(base_url: str, default_headers: dict[str, str]) -> KatharsisClient:
    return KatharsisClient(base_url, default_headers)
