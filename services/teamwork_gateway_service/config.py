"""
Configuration for the Teamwork Gateway Service.

Uses Pydantic settings for environment-based configuration. The bare
``TEAMWORK_URL``, ``API_KEY``, ``HOST`` and ``PORT`` variables are accepted
alongside the prefixed names.
"""

from __future__ import annotations

from gateway_service_libs.config import ServiceSettings
from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import SettingsConfigDict


class Settings(ServiceSettings):
    """Configuration settings for the Teamwork Gateway Service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TEAMWORK_GATEWAY_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    # Service identity
    SERVICE_NAME: str = "teamwork-gateway-service"

    # HTTP server configuration
    HTTP_HOST: str = Field(
        default="127.0.0.1",
        description="HTTP server host",
        validation_alias=AliasChoices("HTTP_HOST", "TEAMWORK_GATEWAY_HTTP_HOST", "HOST"),
    )
    HTTP_PORT: int = Field(
        default=3000,
        description="HTTP server port",
        validation_alias=AliasChoices("HTTP_PORT", "TEAMWORK_GATEWAY_HTTP_PORT", "PORT"),
    )

    # Logging configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # Upstream
    TEAMWORK_URL: str | None = Field(
        default=None,
        description="Teamwork API base URL, e.g. https://example.teamwork.com",
        validation_alias=AliasChoices("TEAMWORK_URL", "TEAMWORK_GATEWAY_TEAMWORK_URL"),
    )
    API_KEY: SecretStr | None = Field(
        default=None,
        description="Static Teamwork API key used when a request carries no Authorization",
        validation_alias=AliasChoices("API_KEY", "TEAMWORK_GATEWAY_API_KEY"),
    )

    # HTTP Client Timeouts
    HTTP_CLIENT_TIMEOUT_SECONDS: float = Field(
        default=30.0, description="Upstream request timeout in seconds"
    )
    HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS: float = Field(
        default=10.0, description="Upstream connection timeout in seconds"
    )

    @field_validator("TEAMWORK_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip().rstrip("/")
        return value or None

    @field_validator("API_KEY")
    @classmethod
    def _blank_key_is_unset(cls, value: SecretStr | None) -> SecretStr | None:
        if value is None or not value.get_secret_value():
            return None
        return value

    def upstream_url(self, upstream_path: str) -> str:
        """Absolute upstream URL for a path relative to the Teamwork base."""
        return f"{self.TEAMWORK_URL}/{upstream_path.lstrip('/')}"

    def static_api_key(self) -> str | None:
        return self.API_KEY.get_secret_value() if self.API_KEY is not None else None


# Global settings instance
settings = Settings()
