"""
Exception hierarchy for the paper analyzer.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class PaperAnalyzerException(Exception):
    """Base exception for all paper analyzer errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(PaperAnalyzerException):
    """Raised when request validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UploadTooLargeError(PaperAnalyzerException):
    """Raised when an uploaded file exceeds the configured size limit."""

    def __init__(self, size_bytes: int, limit_bytes: int) -> None:
        super().__init__(
            "File too large",
            {"size_bytes": size_bytes, "limit_bytes": limit_bytes},
        )


class DocumentProcessingError(PaperAnalyzerException):
    """Base exception for document processing errors."""

    def __init__(
        self,
        message: str,
        file_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            file_name: Name of the document that failed
            details: Additional context
        """
        details = details or {}
        if file_name:
            details["file_name"] = file_name
        super().__init__(message, details)


class ParsingError(DocumentProcessingError):
    """Raised when a PDF cannot be loaded into text."""


class EmbeddingError(DocumentProcessingError):
    """Raised when embedding generation fails."""


class VectorStoreError(PaperAnalyzerException):
    """Raised when vector index operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (build, search)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class AnalysisError(PaperAnalyzerException):
    """Raised when a retrieval-QA call to the hosted model fails."""

    def __init__(
        self,
        message: str,
        question: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize analysis error.

        Args:
            message: Error message
            question: Question being answered when the failure occurred
            details: Additional context
        """
        details = details or {}
        if question:
            details["question"] = question
        super().__init__(message, details)
