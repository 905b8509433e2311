"""
Observability module.

Provides structured logging, correlation ID tracking, and request logging
middleware.
"""

from paper_analyzer.observability.correlation import get_correlation_id, set_correlation_id
from paper_analyzer.observability.logger import configure_logging

__all__ = ["configure_logging", "get_correlation_id", "set_correlation_id"]
