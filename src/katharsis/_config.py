from os import environ as env
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._utils.constants import ENV_BASE_URL, ENV_CAPTURE_STATUS_ERRORS, ENV_DEBUG

_TRUTHY = {"1", "true", "yes", "on"}


class ClientConfig(BaseModel):
    """Settings held by a ``KatharsisClient``.

    Assignments are validated, so ``config.base_url = None`` still yields an
    empty string.
    """

    model_config = ConfigDict(validate_assignment=True)

    base_url: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
    capture_status_errors: bool = False
    follow_redirects: bool = True
    debug: bool = False

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_base_url(cls, value: Optional[str]) -> str:
        return "" if value is None else value

    @field_validator("headers", mode="before")
    @classmethod
    def validate_headers(cls, value: Optional[dict[str, str]]) -> dict[str, str]:
        return {} if value is None else value

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientConfig":
        """Build a config from ``KATHARSIS_*`` variables and a local ``.env``.

        Keyword overrides take precedence over the environment.
        """
        load_dotenv()

        values: dict[str, Any] = {
            "base_url": env.get(ENV_BASE_URL, ""),
            "capture_status_errors": _flag(env.get(ENV_CAPTURE_STATUS_ERRORS)),
            "debug": _flag(env.get(ENV_DEBUG)),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def _flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY
