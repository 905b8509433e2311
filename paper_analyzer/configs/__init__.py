"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from paper_analyzer.configs.analysis import AnalysisSettings
from paper_analyzer.configs.settings import Settings, get_settings

__all__ = ["AnalysisSettings", "Settings", "get_settings"]
