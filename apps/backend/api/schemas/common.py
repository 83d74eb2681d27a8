"""
Common schemas shared across API endpoints.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Human-readable error message")


class MessageResponse(BaseModel):
    """Static status message (health checks, key validation)."""

    message: str


# OpenAPI response declarations reused by every proxied endpoint
UPSTREAM_ERRORS = {
    500: {"model": ErrorResponse, "description": "TMDB request failed"},
}

VALIDATION_ERRORS = {
    400: {"model": ErrorResponse, "description": "Invalid request parameters"},
}
