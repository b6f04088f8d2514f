"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.constants import SpotifyEndpoints, SpotifyLimits
from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import (
    BusyTimeoutMs,
    ConnectionTimeoutS,
    ExpiryMarginSeconds,
    HttpUrlStr,
    MarketStr,
    SearchLimit,
)


class DatabaseSettings(BaseModel):
    """Storage for the persisted client configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    url: str = Field(
        default="sqlite:///data/spotify-tui.db",
        validation_alias=AliasChoices("url", "database_url", "db_url"),
    )
    busy_timeout_ms: BusyTimeoutMs = Field(
        default=5000,
        validation_alias=AliasChoices("busy_timeout_ms", "busy_timeout"),
    )
    connection_timeout_s: ConnectionTimeoutS = Field(
        default=10,
        validation_alias=AliasChoices("connection_timeout_s", "connection_timeout"),
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith("sqlite://"):
            raise ValueError(ErrorMessages.INVALID_DATABASE_URL)
        return v


class SpotifySettings(BaseModel):
    """Spotify application credentials and accounts endpoints."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    client_id: str = Field(
        default="", validation_alias=AliasChoices("client_id", "spotify_client_id")
    )
    client_secret: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("client_secret", "spotify_client_secret"),
    )
    redirect_uri: HttpUrlStr = "http://localhost:8888/callback"
    refresh_token: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("refresh_token", "spotify_refresh_token"),
    )
    market: MarketStr | None = None
    token_url: HttpUrlStr = SpotifyEndpoints.TOKEN_URL
    api_base_url: HttpUrlStr = SpotifyEndpoints.API_BASE_URL

    @field_validator("market", mode="before")
    @classmethod
    def normalize_market(cls, v: str | None) -> str | None:
        if isinstance(v, str):
            v = v.strip().upper()
            return v or None
        return v


class DispatchSettings(BaseModel):
    """Page sizes, timeouts and token handling used by the dispatcher."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    large_search_limit: SearchLimit = SpotifyLimits.LARGE_SEARCH_LIMIT
    small_search_limit: SearchLimit = SpotifyLimits.SMALL_SEARCH_LIMIT
    token_expiry_margin_seconds: ExpiryMarginSeconds = Field(
        default=10,
        validation_alias=AliasChoices("token_expiry_margin_seconds", "expiry_margin"),
    )
    request_timeout_seconds: float = Field(default=30.0, gt=0.0, le=300.0)


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - SPOTIFY__CLIENT_ID, SPOTIFY__CLIENT_SECRET, SPOTIFY__REFRESH_TOKEN, ...
    - DISPATCH__LARGE_SEARCH_LIMIT, DISPATCH__SMALL_SEARCH_LIMIT, ...
    - DATABASE__URL (sqlite:/// URL)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    spotify: SpotifySettings = Field(default_factory=SpotifySettings)
    dispatch: DispatchSettings = Field(default_factory=DispatchSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
