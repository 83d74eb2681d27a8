"""
Custom exceptions and error handlers for the API.

Every error leaves the API as ``{"error": "<message>"}``.
"""

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.logging_config import logger


class APIError(HTTPException):
    """Base API error rendered as a single error message."""

    def __init__(self, status_code: int, message: str):
        self.message = message
        super().__init__(status_code=status_code, detail=message)


class BadRequestError(APIError):
    """Missing or malformed request input."""

    def __init__(self, message: str):
        super().__init__(status_code=400, message=message)


class InvalidCredentialsError(APIError):
    """The TMDB API key was rejected."""

    def __init__(self, message: str = "Invalid API Key"):
        super().__init__(status_code=401, message=message)


class UpstreamError(APIError):
    """A TMDB call failed; the message names the failed operation."""

    def __init__(self, message: str):
        super().__init__(status_code=500, message=message)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions and return structured JSON response."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render routing errors (unmatched path, wrong method) in the common error shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render framework validation failures in the common error shape."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"Invalid request parameter {location}: {first.get('msg')}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "An unexpected error occurred"},
    )
