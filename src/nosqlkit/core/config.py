"""Configuration management for NoSQLKit.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once and is
immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NOSQLKIT_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "NoSQLKit"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False

    # Project Layout Settings
    core_dir: str = Field(
        default="./modules",
        description="Root directory holding one sub-directory per domain",
    )
    config_dir: str = Field(
        default="./config",
        description="Directory holding the domain registry (domains.json)",
    )
    templates_dir: str | None = Field(
        default=None,
        description="Optional directory whose templates override the bundled ones",
    )
    root_domain_label: str = "ROOT"

    # MongoDB Settings
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_database: str | None = Field(
        default=None,
        description="Database used for every domain; defaults to the domain label",
    )
    mongo_server_selection_timeout_ms: int = 5000
    mongo_connect_timeout_ms: int = 5000

    # Sync Settings
    sync_update_existing: bool = Field(
        default=False,
        description="Replace the validator of existing collections with collMod during sync",
    )

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("core_dir", "config_dir")
    @classmethod
    def validate_directory(cls, v: str) -> str:
        """Reject empty directory settings."""
        if not v or not v.strip():
            raise ValueError("Directory setting must not be empty")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"

    @property
    def mongo_uri_masked(self) -> str:
        """MongoDB URI with the credentials replaced, safe to display."""
        scheme, separator, rest = self.mongo_uri.partition("://")
        if not separator:
            return self.mongo_uri
        _, at, hosts = rest.rpartition("@")
        if not at:
            return self.mongo_uri
        return f"{scheme}://***@{hosts}"

    def database_name_for(self, domain: str) -> str:
        """Resolve the MongoDB database that backs a domain."""
        return self.mongo_database or domain.lower()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
