"""Client configuration: explicit keyword arguments or environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from github_manager.domain.exceptions import ConfigurationError
from github_manager.domain.value_objects import DEFAULT_ERROR_MESSAGE


class GitHubSettings(BaseSettings):
    """Immutable client configuration.

    Build it once and hand the same instance to every manager::

        settings = GitHubSettings(token="ghp_...", request_timeout=10)

    Any field can also come from a ``GITHUB_MANAGER_*`` environment variable
    (or ``.env`` file), e.g. ``GITHUB_MANAGER_TOKEN``.
    """

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_MANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    token: SecretStr
    default_error_message: str = DEFAULT_ERROR_MESSAGE
    request_timeout: float = 30.0
    base_url: str = "https://api.github.com"
    api_version: str = "2022-11-28"
    user_agent: str = "github-manager/1.0"
    log_level: str = "INFO"
    log_payloads: bool = False

    @field_validator("token")
    @classmethod
    def _token_not_blank(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            msg = "token must not be empty."
            raise ValueError(msg)
        return v

    @field_validator("request_timeout")
    @classmethod
    def _positive_timeout(cls, v: float) -> float:
        if v <= 0:
            msg = "request_timeout must be a positive number of seconds."
            raise ValueError(msg)
        return v

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> GitHubSettings:
    """Return the environment-loaded settings (cached after first call)."""
    try:
        return GitHubSettings()  # type: ignore[call-arg]
    except ValidationError as exc:
        raise ConfigurationError(
            "No valid GitHub configuration found. "
            "Pass GitHubSettings(token=...) explicitly or set GITHUB_MANAGER_TOKEN."
        ) from exc
