"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from paper_analyzer.configs.analysis import AnalysisSettings
from paper_analyzer.configs.base import BaseSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    google_api_key: str = Field(
        default="",
        description="Credential for the hosted Gemini embedding and chat models",
    )
    max_upload_bytes: int = Field(
        default=25 * 1024 * 1024,
        description="Largest accepted PDF upload in bytes",
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API",
    )

    # Aggregated settings
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from paper_analyzer.configs import get_settings
        settings = get_settings()
    """
    return Settings()
