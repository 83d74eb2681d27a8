"""
FastAPI application for the TMDB proxy.

Mounts four route groups in front of the TMDB API:
generic search, movies, TV shows and people.
"""

import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.exceptions import (
    APIError,
    api_error_handler,
    generic_exception_handler,
    http_exception_handler,
    validation_error_handler,
)
from api.logging_config import (
    logger,
    generate_request_id,
    set_request_id,
)

from api.routers import movies, people, tmdb, tv
from tmdb_proxy.config import allowed_origins_from_env

app = FastAPI(
    title="Media API",
    description="API for movies, TV shows and people, backed by TMDB",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# Register exception handlers
app.add_exception_handler(APIError, api_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Empty ALLOWED_ORIGINS means any origin
allowed_origins = allowed_origins_from_env()
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Log all HTTP requests with timing and response status."""
    request_id = generate_request_id()
    set_request_id(request_id)

    # Skip logging for health checks and docs
    skip_paths = {"/", "/api/docs", "/api/redoc", "/api/openapi.json"}
    if request.url.path in skip_paths or request.url.path.endswith("/health"):
        return await call_next(request)

    start_time = time.time()
    client_ip = request.client.host if request.client else "unknown"

    logger.info(
        f"Request started: {request.method} {request.url.path} "
        f"from {client_ip}"
    )

    try:
        response = await call_next(request)
        duration_ms = (time.time() - start_time) * 1000

        log_msg = (
            f"Request completed: {request.method} {request.url.path} "
            f"status={response.status_code} duration={duration_ms:.2f}ms"
        )

        if response.status_code >= 500:
            logger.error(log_msg)
        elif response.status_code >= 400:
            logger.warning(log_msg)
        else:
            logger.info(log_msg)

        # Add request ID to response headers for debugging
        response.headers["X-Request-ID"] = request_id
        return response

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        logger.error(
            f"Request failed: {request.method} {request.url.path} "
            f"duration={duration_ms:.2f}ms error={str(e)}"
        )
        raise


# Mount route groups
app.include_router(tmdb.router, prefix="/api", tags=["TMDB"])
app.include_router(movies.router, prefix="/api/movies", tags=["Movies"])
app.include_router(tv.router, prefix="/api/tv", tags=["TV Shows"])
app.include_router(people.router, prefix="/api/person", tags=["People"])


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint points to the docs."""
    return {
        "message": "Media API",
        "docs": "/api/docs",
        "redoc": "/api/redoc",
    }
