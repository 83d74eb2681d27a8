"""
TV show endpoints.

Series ids are matched as plain strings and validated by the
``valid_series_id`` dependency, so a malformed id gets a 400 rather
than falling through to a 404.
"""

from typing import List

from fastapi import APIRouter, Depends

from api.dependencies import get_tmdb_client, required_query, valid_series_id
from api.schemas import (
    CreditsSchema,
    MessageResponse,
    ReviewSchema,
    TVShowSchema,
    UPSTREAM_ERRORS,
    VALIDATION_ERRORS,
)
from api.services.proxy import as_entity, as_list, forward, select_field
from tmdb_proxy.client import TMDBClient
from tmdb_proxy.models import Review, TVShow, normalize_credits

router = APIRouter()

TV_LIST_RESPONSES = {200: {"model": List[TVShowSchema]}, **UPSTREAM_ERRORS}
SERIES_ERRORS = {**VALIDATION_ERRORS, **UPSTREAM_ERRORS}


@router.get("/health", response_model=MessageResponse)
def health():
    """Check if the TV show API is running."""
    return {"message": "TV Show API is running"}


@router.get("/popular", responses=TV_LIST_RESPONSES)
def get_popular_shows(client: TMDBClient = Depends(get_tmdb_client)):
    """Get the current popular TV shows."""
    return forward(client, "/tv/popular", "Failed to fetch popular TV shows", as_list(TVShow))


@router.get(
    "/latest",
    responses={200: {"model": TVShowSchema}, **UPSTREAM_ERRORS},
)
def get_latest_show(client: TMDBClient = Depends(get_tmdb_client)):
    """Get the most recently added TV show."""
    return forward(client, "/tv/latest", "Failed to fetch latest TV show", as_entity(TVShow))


@router.get("/airing_today", responses=TV_LIST_RESPONSES)
def get_airing_today_shows(client: TMDBClient = Depends(get_tmdb_client)):
    """Get TV shows with an episode airing today."""
    return forward(
        client, "/tv/airing_today", "Failed to fetch airing today TV shows", as_list(TVShow)
    )


@router.get("/on_the_air", responses=TV_LIST_RESPONSES)
def get_on_the_air_shows(client: TMDBClient = Depends(get_tmdb_client)):
    """Get TV shows airing within the next seven days."""
    return forward(client, "/tv/on_the_air", "Failed to fetch TV shows on the air", as_list(TVShow))


@router.get("/top_rated", responses=TV_LIST_RESPONSES)
def get_top_rated_shows(client: TMDBClient = Depends(get_tmdb_client)):
    """Get the top rated TV shows."""
    return forward(client, "/tv/top_rated", "Failed to fetch top-rated TV shows", as_list(TVShow))


def _search_shows(query: str, client: TMDBClient) -> list:
    return forward(
        client,
        "/search/tv",
        "Failed to search TV shows",
        as_list(TVShow),
        params={"query": query},
    )


@router.get("/search", responses={**TV_LIST_RESPONSES, **VALIDATION_ERRORS})
def search_shows(
    query: str = Depends(required_query),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Search TV shows by name. The query parameter is required."""
    return _search_shows(query, client)


@router.get(
    "/search/tv",
    responses={**TV_LIST_RESPONSES, **VALIDATION_ERRORS},
    include_in_schema=False,
)
def search_shows_legacy(
    query: str = Depends(required_query),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Older path for TV search, kept for existing clients."""
    return _search_shows(query, client)


@router.get(
    "/{series_id}",
    responses={200: {"model": TVShowSchema}, **SERIES_ERRORS},
)
def get_show(
    series_id: str = Depends(valid_series_id),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Get details for a TV show."""
    return forward(
        client,
        f"/tv/{series_id}",
        f"Failed to fetch TV show with id {series_id}",
        as_entity(TVShow),
    )


@router.get("/{series_id}/videos", responses=SERIES_ERRORS)
def get_show_videos(
    series_id: str = Depends(valid_series_id),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Get trailers and other videos for a TV show."""
    return forward(
        client,
        f"/tv/{series_id}/videos",
        f"Failed to fetch videos for TV show with id {series_id}",
        select_field("results"),
    )


@router.get("/{series_id}/watch/providers", responses=SERIES_ERRORS)
def get_show_watch_providers(
    series_id: str = Depends(valid_series_id),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Get streaming providers for a TV show by country."""
    return forward(
        client,
        f"/tv/{series_id}/watch/providers",
        f"Failed to fetch watch providers for TV show with id {series_id}",
        select_field("results"),
    )


@router.get("/{series_id}/images", responses=SERIES_ERRORS)
def get_show_images(
    series_id: str = Depends(valid_series_id),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Get backdrop images for a TV show."""
    return forward(
        client,
        f"/tv/{series_id}/images",
        f"Failed to fetch images for TV show with id {series_id}",
        select_field("backdrops"),
    )


@router.get(
    "/{series_id}/credits",
    responses={200: {"model": CreditsSchema}, **SERIES_ERRORS},
)
def get_show_credits(
    series_id: str = Depends(valid_series_id),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Get cast and crew for the latest season of a TV show."""
    return forward(
        client,
        f"/tv/{series_id}/credits",
        f"Failed to fetch credits for TV show with id {series_id}",
        normalize_credits,
    )


@router.get(
    "/{series_id}/reviews",
    responses={200: {"model": List[ReviewSchema]}, **SERIES_ERRORS},
)
def get_show_reviews(
    series_id: str = Depends(valid_series_id),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Get user reviews for a TV show."""
    return forward(
        client,
        f"/tv/{series_id}/reviews",
        f"Failed to fetch reviews for TV show with id {series_id}",
        as_list(Review),
    )


@router.get("/{series_id}/recommendations", responses={**TV_LIST_RESPONSES, **SERIES_ERRORS})
def get_show_recommendations(
    series_id: str = Depends(valid_series_id),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Get recommended TV shows for a TV show."""
    return forward(
        client,
        f"/tv/{series_id}/recommendations",
        f"Failed to fetch recommendations for TV show with id {series_id}",
        as_list(TVShow),
    )


@router.get("/{series_id}/similar", responses={**TV_LIST_RESPONSES, **SERIES_ERRORS})
def get_similar_shows(
    series_id: str = Depends(valid_series_id),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Get TV shows similar to this one."""
    return forward(
        client,
        f"/tv/{series_id}/similar",
        f"Failed to fetch similar TV shows for id {series_id}",
        as_list(TVShow),
    )
