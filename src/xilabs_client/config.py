"""Connection configuration for the ElevenLabs client."""

import os
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from . import __version__
from .errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.elevenlabs.io"
API_KEY_ENV = "ELEVENLABS_API_KEY"
BASE_URL_ENV = "ELEVENLABS_BASE_URL"


class ClientConfig(BaseModel):
    """Immutable connection settings, resolved once per client."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=30.0, gt=0)  # read timeout, seconds
    connect_timeout: float = Field(default=10.0, gt=0)
    user_agent: str = f"xilabs-client/{__version__}"

    @field_validator("api_key")
    @classmethod
    def _api_key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("API key must not be blank")
        return value

    @field_validator("base_url")
    @classmethod
    def _base_url_is_http(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base URL: {value}")
        return value.rstrip("/")

    @property
    def ws_base_url(self) -> str:
        """Base URL with the scheme swapped for its WebSocket counterpart."""
        if self.base_url.startswith("https://"):
            return "wss://" + self.base_url[len("https://"):]
        return "ws://" + self.base_url[len("http://"):]

    def redacted(self) -> dict[str, Any]:
        """Settings as a dict with the API key masked, safe to log."""
        data = self.model_dump()
        data["api_key"] = "[REDACTED]"
        return data

    @classmethod
    def resolve(
        cls,
        api_key: str | None = None,
        base_url: str | None = None,
        config: "ClientConfig | None" = None,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> "ClientConfig":
        """Build the effective configuration.

        Precedence for each setting: explicit argument, then the injected
        ``config``, then the environment, then the built-in default. Only the
        base URL has a default; a missing API key is an error.

        Args:
            api_key: Explicit API key.
            base_url: Explicit base URL.
            config: Injected configuration to fall back to.
            environ: Environment mapping (defaults to os.environ).
            **overrides: Other ClientConfig fields (timeout, connect_timeout,
                user_agent). None values are ignored.

        Returns:
            A validated ClientConfig.

        Raises:
            ConfigurationError: If no API key is found or a value is invalid.
        """
        env = os.environ if environ is None else environ

        resolved_key = api_key or (config.api_key if config else None) or env.get(API_KEY_ENV)
        if not resolved_key:
            raise ConfigurationError(
                f"ElevenLabs API key not provided. Pass api_key, inject a ClientConfig "
                f"or set the {API_KEY_ENV} environment variable."
            )

        resolved_url = (
            base_url
            or (config.base_url if config else None)
            or env.get(BASE_URL_ENV)
            or DEFAULT_BASE_URL
        )

        values: dict[str, Any] = config.model_dump() if config else {}
        values.update({k: v for k, v in overrides.items() if v is not None})
        values["api_key"] = resolved_key
        values["base_url"] = resolved_url

        try:
            return cls(**values)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid client configuration: {e}") from e
