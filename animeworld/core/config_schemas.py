"""
Configuration Schemas - Pydantic models for configuration validation.

This module defines the data structures and validation rules for
the provider and logging settings read from ``settings.json``.
"""

from typing import Any, Dict, Literal

from pydantic import BaseModel, Field, field_validator


DEFAULT_BASE_URL = "https://www.animeworld.tv"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class ProviderSettings(BaseModel):
    """Transport and site settings for the AnimeWorld provider."""

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Site root used to resolve relative links"
    )
    timeout: int = Field(
        default=30,
        ge=1,
        le=300,
        description="Network timeout in seconds"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent with every request"
    )

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure the base URL is absolute and has no trailing slash."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError(f"Base URL must start with http:// or https://: {v}")
        return v.rstrip('/')

    def to_plugin_config(self) -> Dict[str, Any]:
        """Get the dictionary form accepted by the plugin constructor."""
        return self.model_dump()


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level"
    )

    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v


class AppSettings(BaseModel):
    """Main application settings container."""

    provider: ProviderSettings = Field(default_factory=ProviderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "ProviderSettings",
    "LoggingSettings",
    "AppSettings",
]
