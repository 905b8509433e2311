"""FastAPI dependency providers."""

from .dependencies import ServiceCache, get_service_cache, get_settings_dependency

__all__ = ["ServiceCache", "get_service_cache", "get_settings_dependency"]
