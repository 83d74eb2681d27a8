"""
Media-related Pydantic schemas.

These document the shapes produced by ``tmdb_proxy.models``.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field


class MediaSchema(BaseModel):
    """Fields shared by movies, TV shows and people."""

    id: Optional[int] = Field(None, description="TMDB identifier")
    mediaType: str = Field("unknown", description="Movie, TVShow or Person")
    popularity: Optional[float] = None
    overview: Optional[str] = None
    posterPath: Optional[str] = None
    backdropPath: Optional[str] = None


class MovieSchema(MediaSchema):
    """Movie list item or detail."""

    title: Optional[str] = None
    originalTitle: Optional[str] = None
    releaseDate: Optional[str] = None
    genreIds: Optional[List[int]] = None
    voteAverage: Optional[float] = None
    voteCount: Optional[int] = None


class TVShowSchema(MediaSchema):
    """TV show list item or detail."""

    name: Optional[str] = None
    originalName: Optional[str] = None
    firstAirDate: Optional[str] = None
    genreIds: Optional[List[int]] = None
    voteAverage: Optional[float] = None
    voteCount: Optional[int] = None


class PersonSchema(MediaSchema):
    """Person, cast or crew member."""

    name: Optional[str] = None
    knownFor: Optional[List[Any]] = None
    gender: Optional[int] = None
    knownForDepartment: Optional[str] = None


class ReviewSchema(BaseModel):
    """User review."""

    author: Optional[str] = None
    content: Optional[str] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    rating: float = 0


class CreditsSchema(BaseModel):
    """Cast and crew of a movie or TV show."""

    cast: List[PersonSchema] = []
    crew: List[PersonSchema] = []


class MultiSearchResponse(BaseModel):
    """Mixed search results; unknown kinds are returned as TMDB sent them."""

    searchResults: List[Union[MovieSchema, TVShowSchema, PersonSchema, dict]]
