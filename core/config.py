"""Configuration management using pydantic-settings."""
from typing import Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Configuration priority (highest to lowest):
    1. Runtime environment variables
    2. .env file
    3. Defaults in this class
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # ============================================
    # SERVICE ENDPOINTS (Defaults with env override)
    # ============================================
    records_url: str = Field(
        default="http://localhost:3000/records",
        description="Base URL of the /records collection endpoint"
    )
    records_page_size: int = Field(
        default=10,
        gt=0,
        description="Number of records requested per page (sent as 'limit')"
    )
    request_timeout: Optional[float] = Field(
        default=30.0,
        description="HTTP timeout in seconds for the default transport. Unset disables the timeout."
    )

    # Application Configuration
    app_name: str = Field(
        default="records-client",
        description="Application name"
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version"
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode (console log rendering)"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )


# Global settings instance
settings = Settings()
