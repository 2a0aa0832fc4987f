"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bvg_mcp import __version__
from bvg_mcp.adapters.bvg_api.constants import BVG_API_BASE_URL

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream API configuration
    bvg_api_base_url: str = Field(
        default=BVG_API_BASE_URL,
        description="Base URL of the BVG transport.rest API (override for testing)",
    )
    bvg_api_user_agent: str = Field(
        default=f"bvg-mcp-server/{__version__}",
        description="User-Agent header sent with every upstream request",
    )

    # Logging configuration (logs go to stderr, stdout carries the protocol)
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("bvg_api_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the base URL is an absolute http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("bvg_api_base_url must start with http:// or https://")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return v.upper()
