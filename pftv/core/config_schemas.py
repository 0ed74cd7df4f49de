"""
Configuration Schemas - Pydantic models for configuration validation.

This module defines the data structures and validation rules for
scraper, network and logging settings.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from pftv.core.dates import to_strftime


class ScraperSettings(BaseModel):
    """Site layout and output formatting settings."""

    base_url: str = Field(
        default="http://projectfreetv.club/",
        description="Base URL of the listings website"
    )
    tv_path: str = Field(
        default="internet",
        description="Path of the TV section below the base URL"
    )
    date_format: str = Field(
        default="%d/%m/%Y",
        description="Output format for dates (strftime or tokens such as 'DD MMM YYYY')"
    )

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure the base URL is absolute and ends with a slash."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError("base_url must start with http:// or https://")
        return v if v.endswith('/') else v + '/'

    @field_validator('tv_path')
    @classmethod
    def validate_tv_path(cls, v: str) -> str:
        return v.strip('/')

    @field_validator('date_format')
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        """Reject formats that would render no date at all."""
        if '%' not in to_strftime(v):
            raise ValueError(f"Date format has no date directives: {v!r}")
        return v


class NetworkSettings(BaseModel):
    """HTTP retrieval settings shared by the loader and resolvers."""

    timeout: int = Field(
        default=30,
        ge=5,
        le=300,
        description="Network timeout in seconds"
    )
    max_retries: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Maximum number of retry attempts"
    )
    retry_delay: float = Field(
        default=1.0,
        ge=0.0,
        le=60.0,
        description="Base delay between retries in seconds"
    )
    max_redirects: int = Field(
        default=10,
        ge=0,
        le=30,
        description="Maximum number of redirects to follow"
    )
    user_agent: str = Field(
        default="Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0 Safari/537.36",
        description="User-Agent header sent with every request"
    )


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level"
    )


class AppSettings(BaseModel):
    """Main application settings container."""

    scraper: ScraperSettings = Field(default_factory=ScraperSettings)
    network: NetworkSettings = Field(default_factory=NetworkSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Export all configuration models
__all__ = [
    "ScraperSettings",
    "NetworkSettings",
    "LoggingSettings",
    "AppSettings",
]
