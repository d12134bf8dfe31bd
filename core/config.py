"""Configuration models and loading."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.exceptions import ConfigurationError

DEFAULT_PORT = 3000


class ProxySettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_requests: bool = False


class WordPressSettings(BaseModel):
    """Upstream WordPress origin and the Basic Auth credential pair."""

    model_config = ConfigDict(frozen=True)

    api_url: str | None = None
    username: str | None = None
    password: str | None = None
    # Seconds; None leaves the upstream call unbounded.
    timeout: float | None = None

    @field_validator("api_url", "username", "password", mode="before")
    @classmethod
    def _blank_is_missing(cls, value: str | None) -> str | None:
        return value or None

    def missing(self) -> dict[str, bool]:
        """Map each credential variable to whether it is absent."""
        return {
            "WP_API_URL": not self.api_url,
            "WP_API_USERNAME": not self.username,
            "WP_API_PASSWORD": not self.password,
        }

    @property
    def is_configured(self) -> bool:
        return not any(self.missing().values())


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    proxy: ProxySettings = Field(default_factory=ProxySettings)
    wordpress: WordPressSettings = Field(default_factory=WordPressSettings)


def _flag(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """Build the process configuration from environment variables.

    Raises:
        ConfigurationError: If PORT or WP_API_TIMEOUT is not a valid number.
    """
    env = os.environ if environ is None else environ
    proxy: dict[str, object] = {"log_requests": _flag(env.get("LOG_REQUESTS"))}
    if env.get("HOST"):
        proxy["host"] = env["HOST"]
    if env.get("PORT"):
        proxy["port"] = env["PORT"]

    try:
        return Config(
            proxy=ProxySettings.model_validate(proxy),
            wordpress=WordPressSettings(
                api_url=env.get("WP_API_URL"),
                username=env.get("WP_API_USERNAME"),
                password=env.get("WP_API_PASSWORD"),
                timeout=env.get("WP_API_TIMEOUT") or None,
            ),
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
