"""
Common response models.

Error schemas shared by all endpoints.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema. Carries only an opaque message."""

    error: str = Field(description="Error message")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
