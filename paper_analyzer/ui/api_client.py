"""
API client for communicating with the paper analysis backend.

Dependencies: requests, pydantic_settings, paper_analyzer.models
System role: HTTP boundary between the UI and the analyze endpoint
"""

import logging

import requests
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from paper_analyzer.models.analysis import AnalysisResult

logger = logging.getLogger(__name__)

ANALYZE_ENDPOINT = "/api/analyze"


class ClientSettings(BaseSettings):
    """Settings for the UI's connection to the API."""

    model_config = SettingsConfigDict(
        env_prefix="ANALYZER_",
        case_sensitive=False,
        extra="ignore",
    )

    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the paper analysis API",
    )
    timeout_seconds: float = Field(
        default=600.0,
        description="Per-file request timeout; analysis of large papers is slow",
    )


class AnalysisRequestError(Exception):
    """Raised when the analyze endpoint cannot produce a result for a file."""

    def __init__(self, message: str, file_name: str, status_code: int | None = None) -> None:
        self.file_name = file_name
        self.status_code = status_code
        super().__init__(message)


class AnalyzerClient:
    """Thin client for POST /api/analyze."""

    def __init__(
        self,
        settings: ClientSettings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._session = session or requests.Session()

    @property
    def analyze_url(self) -> str:
        return f"{self._settings.api_base_url.rstrip('/')}{ANALYZE_ENDPOINT}"

    def analyze_paper(self, file_name: str, content: bytes, topic: str) -> AnalysisResult:
        """
        Upload one PDF with the topic and return its analysis.

        Args:
            file_name: Name shown on the result card
            content: Raw PDF bytes
            topic: Research topic

        Returns:
            AnalysisResult: Summary fields plus file name

        Raises:
            AnalysisRequestError: Transport failure, non-200 status, or
                malformed response body
        """
        try:
            response = self._session.post(
                self.analyze_url,
                files={"file": (file_name, content, "application/pdf")},
                data={"topic": topic},
                timeout=self._settings.timeout_seconds,
            )
        except requests.exceptions.RequestException as e:
            logger.warning(
                "Analysis request failed",
                extra={"file_name": file_name, "error": str(e)},
            )
            raise AnalysisRequestError(f"Request failed: {e}", file_name) from e

        if response.status_code != 200:
            logger.warning(
                "Analysis failed",
                extra={"file_name": file_name, "status_code": response.status_code},
            )
            raise AnalysisRequestError(
                "Analysis failed", file_name, status_code=response.status_code
            )

        try:
            body = response.json()
            if not isinstance(body, dict):
                raise TypeError(f"expected a JSON object, got {type(body).__name__}")
            return AnalysisResult.model_validate({**body, "file_name": file_name})
        except (ValueError, TypeError) as e:
            raise AnalysisRequestError(
                f"Malformed analysis response: {e}", file_name, status_code=200
            ) from e
