"""
Data models for the TMDB proxy.

Typed views over raw TMDB JSON. Each entity is built from a single raw
object with ``from_tmdb`` and serialized with ``to_dict`` (camelCase keys).
Missing fields become None; nothing here validates input.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, Union

UNKNOWN_MEDIA_TYPE = "unknown"


@dataclass(frozen=True)
class Media:
    """Fields shared by movies, TV shows and people."""

    id: Optional[int] = None
    media_type: str = UNKNOWN_MEDIA_TYPE
    popularity: Optional[float] = None
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None

    # Tag written by specialized entities, overriding upstream media_type
    MEDIA_TYPE = None

    @staticmethod
    def _base_fields(data: dict) -> dict:
        return {
            "id": data.get("id"),
            "media_type": data.get("media_type") or UNKNOWN_MEDIA_TYPE,
            "popularity": data.get("popularity"),
            "overview": data.get("overview"),
            "poster_path": data.get("poster_path"),
            "backdrop_path": data.get("backdrop_path"),
        }

    @classmethod
    def _from_base(cls, data: dict, **extra) -> "Media":
        fields = cls._base_fields(data)
        if cls.MEDIA_TYPE:
            fields["media_type"] = cls.MEDIA_TYPE
        fields.update(extra)
        return cls(**fields)

    @classmethod
    def from_tmdb(cls, data: dict) -> "Media":
        """Create Media from a TMDB object."""
        return cls._from_base(data)

    def to_dict(self) -> dict:
        """Convert to the API response shape."""
        return {
            "id": self.id,
            "mediaType": self.media_type,
            "popularity": self.popularity,
            "overview": self.overview,
            "posterPath": self.poster_path,
            "backdropPath": self.backdrop_path,
        }


@dataclass(frozen=True)
class Movie(Media):
    """Movie from TMDB (list item or detail)."""

    title: Optional[str] = None
    original_title: Optional[str] = None
    release_date: Optional[str] = None
    genre_ids: Optional[List[int]] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None

    MEDIA_TYPE = "Movie"

    @classmethod
    def from_tmdb(cls, data: dict) -> "Movie":
        """Create Movie from a TMDB movie object."""
        return cls._from_base(
            data,
            title=data.get("title"),
            original_title=data.get("original_title"),
            release_date=data.get("release_date"),
            genre_ids=data.get("genre_ids"),
            vote_average=data.get("vote_average"),
            vote_count=data.get("vote_count"),
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        result.update({
            "title": self.title,
            "originalTitle": self.original_title,
            "releaseDate": self.release_date,
            "genreIds": self.genre_ids,
            "voteAverage": self.vote_average,
            "voteCount": self.vote_count,
        })
        return result


@dataclass(frozen=True)
class TVShow(Media):
    """TV series from TMDB."""

    name: Optional[str] = None
    original_name: Optional[str] = None
    first_air_date: Optional[str] = None
    genre_ids: Optional[List[int]] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None

    MEDIA_TYPE = "TVShow"

    @classmethod
    def from_tmdb(cls, data: dict) -> "TVShow":
        """Create TVShow from a TMDB tv object."""
        return cls._from_base(
            data,
            name=data.get("name"),
            original_name=data.get("original_name"),
            first_air_date=data.get("first_air_date"),
            genre_ids=data.get("genre_ids"),
            vote_average=data.get("vote_average"),
            vote_count=data.get("vote_count"),
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        result.update({
            "name": self.name,
            "originalName": self.original_name,
            "firstAirDate": self.first_air_date,
            "genreIds": self.genre_ids,
            "voteAverage": self.vote_average,
            "voteCount": self.vote_count,
        })
        return result


@dataclass(frozen=True)
class Person(Media):
    """Person from TMDB (actor, director, crew member)."""

    name: Optional[str] = None
    known_for: Optional[List[Any]] = None  # passed through untyped
    gender: Optional[int] = None  # 0=unknown, 1=female, 2=male, 3=non-binary
    known_for_department: Optional[str] = None

    MEDIA_TYPE = "Person"

    @classmethod
    def from_tmdb(cls, data: dict) -> "Person":
        """Create Person from a TMDB person or credit object."""
        return cls._from_base(
            data,
            name=data.get("name"),
            known_for=data.get("known_for"),
            gender=data.get("gender"),
            known_for_department=data.get("known_for_department"),
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        result.update({
            "name": self.name,
            "knownFor": self.known_for,
            "gender": self.gender,
            "knownForDepartment": self.known_for_department,
        })
        return result


@dataclass(frozen=True)
class Review:
    """User review of a movie or TV show."""

    author: Optional[str] = None
    content: Optional[str] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    rating: float = 0

    @classmethod
    def from_tmdb(cls, data: dict) -> "Review":
        """Create Review from a TMDB review object."""
        author_details = data.get("author_details") or {}
        return cls(
            author=data.get("author"),
            content=data.get("content"),
            created=data.get("created_at"),
            updated=data.get("updated_at"),
            rating=author_details.get("rating") or 0,
        )

    def to_dict(self) -> dict:
        return {
            "author": self.author,
            "content": self.content,
            "created": self.created,
            "updated": self.updated,
            "rating": self.rating,
        }


# =============================================================================
# NORMALIZATION HELPERS
# =============================================================================

MULTI_SEARCH_TYPES: Dict[str, Type[Media]] = {
    "movie": Movie,
    "tv": TVShow,
    "person": Person,
}


def normalize_results(
    data: dict,
    entity_cls: type,
    key: str = "results",
) -> List[dict]:
    """
    Normalize every item of ``data[key]``, preserving order.

    Raises:
        KeyError: If the payload has no ``key`` array
    """
    return [entity_cls.from_tmdb(item).to_dict() for item in data[key]]


def normalize_multi_search_item(item: dict) -> Union[dict, Any]:
    """Dispatch one multi-search item on media_type; unknown kinds pass through."""
    media_type = item.get("media_type")
    entity_cls = MULTI_SEARCH_TYPES.get(media_type) if isinstance(media_type, str) else None
    if entity_cls is None:
        return item
    return entity_cls.from_tmdb(item).to_dict()


def normalize_multi_search(items: List[dict]) -> List[Any]:
    """Normalize a mixed list of multi-search results."""
    return [normalize_multi_search_item(item) for item in items]


def normalize_credits(data: dict) -> Dict[str, List[dict]]:
    """Normalize cast and crew lists into Person shapes."""
    return {
        "cast": normalize_results(data, Person, key="cast"),
        "crew": normalize_results(data, Person, key="crew"),
    }
