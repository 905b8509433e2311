"""
Analysis error handling utilities.

Provides a decorator that maps domain exceptions to the opaque JSON error
bodies of the analysis API. Failure detail is logged, never returned.

Dependencies: fastapi, paper_analyzer.core.exceptions
System role: Uniform error responses for analysis endpoints
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse

from paper_analyzer.core.exceptions import (
    ParsingError,
    UploadTooLargeError,
    ValidationError,
)
from paper_analyzer.models.common import ErrorResponse
from paper_analyzer.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

VALIDATION_MESSAGE = "File and topic are required"
PROCESSING_MESSAGE = "Error processing PDF"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error response with a single ``error`` field."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def handle_analysis_errors(func: F) -> F:
    """
    Decorator to turn analysis errors into JSON error responses.

    - ValidationError -> 400 with the validation message
    - UploadTooLargeError -> 413
    - ParsingError -> 500 generic body, logged as a warning
    - anything else -> 500 generic body, logged with traceback
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except ValidationError as e:
            logger.warning("Invalid analysis request", extra={"error": str(e)})
            return error_response(status.HTTP_400_BAD_REQUEST, e.message)

        except UploadTooLargeError as e:
            logger.warning("Upload rejected", extra={"error": str(e)})
            return error_response(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, e.message)

        except ParsingError as e:
            logger.warning(
                "Uploaded file could not be loaded as PDF",
                extra={"error": str(e), **e.details},
            )
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, PROCESSING_MESSAGE)

        except Exception as e:
            log_exception_with_context(logger, "Error processing PDF", e)
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, PROCESSING_MESSAGE)

    return wrapper  # type: ignore
