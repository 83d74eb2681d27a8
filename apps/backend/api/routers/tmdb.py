"""
Generic TMDB endpoints: health, key validation and search across
collections, companies, keywords and mixed media.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_tmdb_client
from api.exceptions import InvalidCredentialsError, UpstreamError
from api.schemas import (
    ErrorResponse,
    MessageResponse,
    MultiSearchResponse,
    UPSTREAM_ERRORS,
)
from api.services.proxy import forward
from tmdb_proxy.client import TMDBClient
from tmdb_proxy.models import normalize_multi_search

router = APIRouter()


@router.get("/health", response_model=MessageResponse)
def health():
    """Check if the TMDB API proxy is running."""
    return {"message": "TMDb API is running"}


@router.get(
    "/auth/validate",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse, "description": "Invalid API Key"}},
)
def validate_api_key(client: TMDBClient = Depends(get_tmdb_client)):
    """
    Check that the configured TMDB API key is valid by requesting a new
    authentication token.
    """
    if not client.validate_credentials():
        raise InvalidCredentialsError()
    return {"message": "API Key is valid"}


@router.get(
    "/validate",
    response_model=MessageResponse,
    responses=UPSTREAM_ERRORS,
)
def validate_configuration(client: TMDBClient = Depends(get_tmdb_client)):
    """Check the API key and TMDB availability via the configuration endpoint."""
    if not client.check_configuration():
        raise UpstreamError("API key is invalid or TMDB service is unavailable.")
    return {"message": "API key is valid."}


@router.get("/search/collection", responses=UPSTREAM_ERRORS)
def search_collections(
    query: Optional[str] = Query(None, description="The search query string"),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Search for movie collections by name."""
    return forward(
        client,
        "/search/collection",
        "Failed to fetch collections",
        params={"query": query},
    )


@router.get("/search/company", responses=UPSTREAM_ERRORS)
def search_companies(
    query: Optional[str] = Query(None, description="The search query string"),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Search for companies by name."""
    return forward(
        client,
        "/search/company",
        "Failed to fetch companies",
        params={"query": query},
    )


@router.get(
    "/search/multi",
    responses={200: {"model": MultiSearchResponse}, **UPSTREAM_ERRORS},
)
def search_multi(
    query: Optional[str] = Query(None, description="The search query string"),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """
    Search across movies, TV shows and people.

    Each result is shaped according to its media_type; results of any
    other kind are returned exactly as TMDB sent them.
    """
    return forward(
        client,
        "/search/multi",
        "Failed to fetch multi-search results",
        shape=lambda data: {"searchResults": normalize_multi_search(data["results"])},
        params={"query": query},
    )


@router.get("/search/keyword", responses=UPSTREAM_ERRORS)
def search_keywords(
    query: Optional[str] = Query(None, description="The search query string"),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Search for keywords by name."""
    return forward(
        client,
        "/search/keyword",
        "Failed to fetch keywords",
        params={"query": query},
    )
