"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: paper_analyzer.configs, paper_analyzer.core
System role: DI container for service injection
"""

from functools import lru_cache

from paper_analyzer.configs import Settings, get_settings
from paper_analyzer.core.analysis_pipeline import AnalysisPipeline


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._analysis_pipeline = None

    @property
    def settings(self) -> Settings:
        """Get settings used to build services."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def analysis_pipeline(self) -> AnalysisPipeline:
        """
        Get cached analysis pipeline.

        Built on first use rather than at startup, so a missing API key
        fails the request instead of the application.
        """
        if self._analysis_pipeline is None:
            from paper_analyzer.core.document_processing.embedding_provider import (
                build_chat_model,
                build_embeddings,
            )

            settings = self.settings
            self._analysis_pipeline = AnalysisPipeline(
                embeddings=build_embeddings(settings.analysis, settings.google_api_key),
                model=build_chat_model(settings.analysis, settings.google_api_key),
                settings=settings.analysis,
            )
        return self._analysis_pipeline

    def clear(self) -> None:
        """Clear all cached instances."""
        self._analysis_pipeline = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()
