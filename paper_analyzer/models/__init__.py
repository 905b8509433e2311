"""Pydantic models for API requests and responses."""

from paper_analyzer.models.analysis import SUMMARY_FIELDS, AnalysisResult, PaperSummary
from paper_analyzer.models.common import ErrorResponse, HealthResponse

__all__ = [
    "SUMMARY_FIELDS",
    "AnalysisResult",
    "PaperSummary",
    "ErrorResponse",
    "HealthResponse",
]
