"""
Movie endpoints.

Movie ids are constrained by the route itself (``{movie_id:int}`` only
matches digits), so non-numeric ids never reach a handler.
"""

from typing import List

from fastapi import APIRouter, Depends

from api.dependencies import get_tmdb_client, required_query
from api.schemas import (
    CreditsSchema,
    MessageResponse,
    MovieSchema,
    ReviewSchema,
    UPSTREAM_ERRORS,
    VALIDATION_ERRORS,
)
from api.services.proxy import as_entity, as_list, forward, select_field
from tmdb_proxy.client import TMDBClient
from tmdb_proxy.models import Movie, Review, normalize_credits

router = APIRouter()

MOVIE_LIST_RESPONSES = {200: {"model": List[MovieSchema]}, **UPSTREAM_ERRORS}


@router.get("/health", response_model=MessageResponse)
def health():
    """Check if the movie API is running."""
    return {"message": "Movie API is running"}


@router.get("/popular", responses=MOVIE_LIST_RESPONSES)
def get_popular_movies(client: TMDBClient = Depends(get_tmdb_client)):
    """Get the current popular movies."""
    return forward(client, "/movie/popular", "Failed to fetch popular movies", as_list(Movie))


@router.get("/now_playing", responses=MOVIE_LIST_RESPONSES)
def get_now_playing_movies(client: TMDBClient = Depends(get_tmdb_client)):
    """Get movies currently in theatres."""
    return forward(
        client, "/movie/now_playing", "Failed to fetch now playing movies", as_list(Movie)
    )


@router.get("/top_rated", responses=MOVIE_LIST_RESPONSES)
def get_top_rated_movies(client: TMDBClient = Depends(get_tmdb_client)):
    """Get the top rated movies."""
    return forward(
        client, "/movie/top_rated", "Failed to fetch top-rated movies", as_list(Movie)
    )


@router.get("/upcoming", responses=MOVIE_LIST_RESPONSES)
def get_upcoming_movies(client: TMDBClient = Depends(get_tmdb_client)):
    """Get upcoming movies."""
    return forward(client, "/movie/upcoming", "Failed to fetch upcoming movies", as_list(Movie))


@router.get("/search", responses={**MOVIE_LIST_RESPONSES, **VALIDATION_ERRORS})
def search_movies(
    query: str = Depends(required_query),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Search movies by title. The query parameter is required."""
    return forward(
        client,
        "/search/movie",
        "Failed to search movies",
        as_list(Movie),
        params={"query": query},
    )


@router.get(
    "/{movie_id:int}",
    responses={200: {"model": MovieSchema}, **UPSTREAM_ERRORS},
)
def get_movie(movie_id: int, client: TMDBClient = Depends(get_tmdb_client)):
    """Get details for a movie."""
    return forward(client, f"/movie/{movie_id}", "Failed to fetch movie details", as_entity(Movie))


@router.get("/{movie_id:int}/images", responses=UPSTREAM_ERRORS)
def get_movie_images(movie_id: int, client: TMDBClient = Depends(get_tmdb_client)):
    """Get images (backdrops, logos, posters) for a movie."""
    return forward(client, f"/movie/{movie_id}/images", "Failed to fetch movie images")


@router.get(
    "/{movie_id:int}/credits",
    responses={200: {"model": CreditsSchema}, **UPSTREAM_ERRORS},
)
def get_movie_credits(movie_id: int, client: TMDBClient = Depends(get_tmdb_client)):
    """Get cast and crew for a movie."""
    return forward(
        client, f"/movie/{movie_id}/credits", "Failed to fetch movie credits", normalize_credits
    )


@router.get("/{movie_id:int}/external_ids", responses=UPSTREAM_ERRORS)
def get_movie_external_ids(movie_id: int, client: TMDBClient = Depends(get_tmdb_client)):
    """Get external ids (IMDb, social media) for a movie."""
    return forward(
        client, f"/movie/{movie_id}/external_ids", "Failed to fetch movie external IDs"
    )


@router.get("/{movie_id:int}/recommendations", responses=MOVIE_LIST_RESPONSES)
def get_movie_recommendations(movie_id: int, client: TMDBClient = Depends(get_tmdb_client)):
    """Get recommended movies for a movie."""
    return forward(
        client,
        f"/movie/{movie_id}/recommendations",
        "Failed to fetch movie recommendations",
        as_list(Movie),
    )


@router.get(
    "/{movie_id:int}/reviews",
    responses={200: {"model": List[ReviewSchema]}, **UPSTREAM_ERRORS},
)
def get_movie_reviews(movie_id: int, client: TMDBClient = Depends(get_tmdb_client)):
    """Get user reviews for a movie."""
    return forward(
        client, f"/movie/{movie_id}/reviews", "Failed to fetch movie reviews", as_list(Review)
    )


@router.get("/{movie_id:int}/similar", responses=MOVIE_LIST_RESPONSES)
def get_similar_movies(movie_id: int, client: TMDBClient = Depends(get_tmdb_client)):
    """Get movies similar to this one."""
    return forward(
        client, f"/movie/{movie_id}/similar", "Failed to fetch similar movies", as_list(Movie)
    )


@router.get("/{movie_id:int}/videos", responses=UPSTREAM_ERRORS)
def get_movie_videos(movie_id: int, client: TMDBClient = Depends(get_tmdb_client)):
    """Get trailers and other videos for a movie."""
    return forward(
        client, f"/movie/{movie_id}/videos", "Failed to fetch movie videos", select_field("results")
    )


@router.get("/{movie_id:int}/watch/providers", responses=UPSTREAM_ERRORS)
def get_movie_watch_providers(movie_id: int, client: TMDBClient = Depends(get_tmdb_client)):
    """Get streaming, rental and purchase providers by country."""
    return forward(
        client,
        f"/movie/{movie_id}/watch/providers",
        "Failed to fetch movie watch providers",
        select_field("results"),
    )
