"""
Person endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends

from api.dependencies import get_tmdb_client, optional_query, valid_person_id
from api.schemas import (
    MessageResponse,
    MovieSchema,
    PersonSchema,
    TVShowSchema,
    UPSTREAM_ERRORS,
    VALIDATION_ERRORS,
)
from api.services.proxy import as_entity, as_list, forward
from tmdb_proxy.client import TMDBClient
from tmdb_proxy.models import Movie, Person, TVShow

router = APIRouter()

PERSON_LIST_RESPONSES = {200: {"model": List[PersonSchema]}, **UPSTREAM_ERRORS}
PERSON_ERRORS = {**VALIDATION_ERRORS, **UPSTREAM_ERRORS}


@router.get("/health", response_model=MessageResponse)
def health():
    """Check if the person API is running."""
    return {"message": "Person API is running"}


@router.get("/popular", responses=PERSON_LIST_RESPONSES)
def get_popular_people(client: TMDBClient = Depends(get_tmdb_client)):
    """Get the current popular people."""
    return forward(client, "/person/popular", "Failed to fetch popular persons", as_list(Person))


@router.get("/search", responses=PERSON_LIST_RESPONSES)
def search_people(
    query: str = Depends(optional_query),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """
    Search people by name.

    Unlike movie and TV search, an empty query is forwarded to TMDB
    instead of being rejected.
    """
    return forward(
        client,
        "/search/person",
        "Failed to perform search",
        as_list(Person),
        params={"query": query},
    )


@router.get(
    "/{person_id}/movie_credits",
    responses={200: {"model": List[MovieSchema]}, **PERSON_ERRORS},
)
def get_person_movie_credits(
    person_id: str = Depends(valid_person_id),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Get the movies a person has acted in."""
    return forward(
        client,
        f"/person/{person_id}/movie_credits",
        "Failed to fetch person movie credits",
        as_list(Movie, key="cast"),
    )


@router.get(
    "/{person_id}/tv_credits",
    responses={200: {"model": List[TVShowSchema]}, **PERSON_ERRORS},
)
def get_person_tv_credits(
    person_id: str = Depends(valid_person_id),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Get the TV shows a person has acted in."""
    return forward(
        client,
        f"/person/{person_id}/tv_credits",
        "Failed to fetch person TV credits",
        as_list(TVShow, key="cast"),
    )


@router.get("/{person_id}/images", responses=PERSON_ERRORS)
def get_person_images(
    person_id: str = Depends(valid_person_id),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Get profile images for a person."""
    return forward(client, f"/person/{person_id}/images", "Failed to fetch person images")


@router.get("/{person_id}/external_ids", responses=PERSON_ERRORS)
def get_person_external_ids(
    person_id: str = Depends(valid_person_id),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Get external ids (IMDb, social media) for a person."""
    return forward(client, f"/person/{person_id}/external_ids", "Failed to fetch external IDs")


@router.get(
    "/{person_id}",
    responses={200: {"model": PersonSchema}, **PERSON_ERRORS},
)
def get_person(
    person_id: str = Depends(valid_person_id),
    client: TMDBClient = Depends(get_tmdb_client),
):
    """Get details for a person."""
    return forward(
        client, f"/person/{person_id}", "Failed to fetch person details", as_entity(Person)
    )
