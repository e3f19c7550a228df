"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TenancySettings(BaseSettings):
    """Tenant resolution settings.

    Environment variables:
        SUITE_TENANCY_HEADER_NAME: Header carrying the tenant id (default: x-tenant-id)
        SUITE_TENANCY_QUERY_PARAM: Query parameter carrying the tenant id (default: tenantId)
        SUITE_TENANCY_DEFAULT_TENANT_ID: Tenant applied to routes that require a
            tenant when the request carries none (default: unset, reject instead)
    """

    model_config = SettingsConfigDict(
        env_prefix="SUITE_TENANCY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    header_name: str = Field(
        default="x-tenant-id",
        description="Request header carrying the tenant id",
        min_length=1,
    )
    query_param: str = Field(
        default="tenantId",
        description="Query parameter carrying the tenant id",
        min_length=1,
    )
    default_tenant_id: str | None = Field(
        default=None,
        description="Fallback tenant for routes that require a tenant",
    )

    @field_validator("header_name", "query_param", mode="before")
    @classmethod
    def strip_names(cls, value: Any) -> Any:
        """Strip surrounding whitespace before the length check runs."""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("header_name")
    @classmethod
    def normalize_header_name(cls, value: str) -> str:
        """Header names are case-insensitive; store them lowercased."""
        return value.lower()

    @field_validator("default_tenant_id")
    @classmethod
    def blank_default_is_unset(cls, value: str | None) -> str | None:
        """Treat an empty default tenant as not configured."""
        if value is None or not value.strip():
            return None
        return value.strip()


class NavigationSettings(BaseSettings):
    """Sidebar navigation settings.

    Environment variables:
        SUITE_NAVIGATION_CONFIG_PATH: JSON file with the navigation config
            (default: unset, use the built-in sidebar)
        SUITE_NAVIGATION_STRICT_VALIDATION: Refuse to start when the config has
            structural problems (default: false, log them instead)
    """

    model_config = SettingsConfigDict(
        env_prefix="SUITE_NAVIGATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    config_path: Path | None = Field(
        default=None,
        description="Path to a JSON navigation config file",
    )
    strict_validation: bool = Field(
        default=False,
        description="Abort startup when the navigation config has violations",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Suite Shell API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def tenancy(self) -> TenancySettings:
        """Get tenancy settings."""
        return get_tenancy_settings()

    @property
    def navigation(self) -> NavigationSettings:
        """Get navigation settings."""
        return get_navigation_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_tenancy_settings() -> TenancySettings:
    """Get cached tenancy settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return TenancySettings()


@lru_cache
def get_navigation_settings() -> NavigationSettings:
    """Get cached navigation settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return NavigationSettings()
