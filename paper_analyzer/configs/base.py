"""
Base configuration settings.

Shared fields for the analyzer API: environment name, uvicorn reload via
`debug`, and the root level passed to `configure_logging` on startup.
`Settings` extends it with the Gemini key, upload limit, and CORS origins;
values come from the environment or a local `.env` file.

Dependencies: pydantic_settings
System role: Foundation for the API settings class
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Application environment (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
