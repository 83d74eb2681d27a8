"""Pydantic schemas documenting API responses."""

from api.schemas.common import (
    ErrorResponse,
    MessageResponse,
    UPSTREAM_ERRORS,
    VALIDATION_ERRORS,
)
from api.schemas.media import (
    CreditsSchema,
    MediaSchema,
    MovieSchema,
    MultiSearchResponse,
    PersonSchema,
    ReviewSchema,
    TVShowSchema,
)

__all__ = [
    # Common
    "ErrorResponse",
    "MessageResponse",
    "UPSTREAM_ERRORS",
    "VALIDATION_ERRORS",
    # Media
    "CreditsSchema",
    "MediaSchema",
    "MovieSchema",
    "MultiSearchResponse",
    "PersonSchema",
    "ReviewSchema",
    "TVShowSchema",
]
