"""
Shared fixtures for TMDB proxy tests.

Provides a mock TMDB client that records every call, and sample payloads.
"""

from typing import Any, Dict, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from tmdb_proxy.client import TMDBError


# =============================================================================
# SAMPLE DATA
# =============================================================================

def create_sample_movie(
    movie_id: int,
    title: str,
    release_date: str = "2023-01-15",
    genre_ids: Optional[List[int]] = None,
    popularity: float = 50.0,
    vote_average: float = 7.5,
) -> dict:
    """Create a raw TMDB movie object for testing."""
    return {
        "id": movie_id,
        "media_type": "movie",
        "title": title,
        "original_title": title,
        "overview": f"This is the overview for {title}.",
        "release_date": release_date,
        "genre_ids": genre_ids or [28, 18],
        "vote_average": vote_average,
        "vote_count": 1000,
        "popularity": popularity,
        "poster_path": f"/poster_{movie_id}.jpg",
        "backdrop_path": f"/backdrop_{movie_id}.jpg",
    }


def create_sample_show(series_id: int, name: str) -> dict:
    """Create a raw TMDB tv object for testing."""
    return {
        "id": series_id,
        "media_type": "tv",
        "name": name,
        "original_name": name,
        "overview": f"This is the overview for {name}.",
        "first_air_date": "2008-01-20",
        "genre_ids": [18, 80],
        "vote_average": 8.9,
        "vote_count": 12000,
        "popularity": 300.5,
        "poster_path": f"/poster_{series_id}.jpg",
        "backdrop_path": None,
    }


def create_sample_person(person_id: int, name: str) -> dict:
    """Create a raw TMDB person object for testing."""
    return {
        "id": person_id,
        "media_type": "person",
        "name": name,
        "gender": 2,
        "known_for_department": "Acting",
        "popularity": 40.0,
        "known_for": [{"id": 550, "media_type": "movie", "title": "Fight Club"}],
    }


def create_sample_review(author: str, rating: Optional[float] = 8.0) -> dict:
    """Create a raw TMDB review object for testing."""
    details = {"name": author, "username": author.lower()}
    if rating is not None:
        details["rating"] = rating
    return {
        "author": author,
        "author_details": details,
        "content": f"Review by {author}",
        "created_at": "2021-06-01T10:00:00.000Z",
        "updated_at": "2021-06-02T10:00:00.000Z",
    }


SAMPLE_MOVIES = [
    create_sample_movie(550, "Fight Club", "1999-10-15", [18], 80.0, 8.4),
    create_sample_movie(27205, "Inception", "2010-07-16", [28, 878, 12], 90.0, 8.8),
    create_sample_movie(155, "The Dark Knight", "2008-07-18", [18, 28, 80], 95.0, 9.0),
]

SAMPLE_SHOWS = [
    create_sample_show(1396, "Breaking Bad"),
    create_sample_show(1399, "Game of Thrones"),
]

SAMPLE_PEOPLE = [
    create_sample_person(287, "Brad Pitt"),
    create_sample_person(819, "Edward Norton"),
]


# =============================================================================
# MOCK TMDB CLIENT
# =============================================================================

class MockTMDBClient:
    """In-memory stand-in for TMDBClient that records every fetch."""

    def __init__(self, responses: Optional[Dict[str, Any]] = None):
        self.responses: Dict[str, Any] = dict(responses or {})
        self.calls: List[Tuple[str, Optional[dict]]] = []
        self.fail = False
        self.credentials_valid = True

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def fetch(self, endpoint: str, params: Optional[dict] = None) -> Any:
        self.calls.append((endpoint, params))
        if self.fail:
            raise TMDBError("boom", endpoint, 503)
        if endpoint not in self.responses:
            raise TMDBError("not found", endpoint, 404)
        return self.responses[endpoint]

    def validate_credentials(self) -> bool:
        self.calls.append(("/authentication/token/new", None))
        return self.credentials_valid

    def check_configuration(self) -> bool:
        self.calls.append(("/configuration", None))
        return self.credentials_valid


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def mock_tmdb_client():
    """Provide a mock TMDB client preloaded with sample payloads."""
    return MockTMDBClient({
        "/movie/popular": {"page": 1, "results": SAMPLE_MOVIES},
        "/movie/now_playing": {"page": 1, "results": SAMPLE_MOVIES[:1]},
        "/movie/top_rated": {"page": 1, "results": SAMPLE_MOVIES[::-1]},
        "/movie/upcoming": {"page": 1, "results": []},
        "/search/movie": {"page": 1, "results": SAMPLE_MOVIES[1:2]},
        "/movie/550": {
            "id": 550,
            "title": "Fight Club",
            "vote_average": 8.4,
            "genre_ids": [18],
        },
        "/movie/550/credits": {
            "id": 550,
            "cast": [dict(SAMPLE_PEOPLE[0], character="Tyler Durden")],
            "crew": [{"id": 7467, "name": "David Fincher", "job": "Director"}],
        },
        "/movie/550/reviews": {
            "results": [
                create_sample_review("Alice", 9.0),
                create_sample_review("Bob", None),
            ],
        },
        "/movie/550/images": {"id": 550, "backdrops": [{"file_path": "/a.jpg"}], "posters": []},
        "/movie/550/videos": {"id": 550, "results": [{"key": "abc", "site": "YouTube"}]},
        "/movie/550/watch/providers": {"id": 550, "results": {"US": {"link": "x"}}},
        "/movie/550/similar": {"results": SAMPLE_MOVIES[1:]},
        "/movie/550/recommendations": {"results": SAMPLE_MOVIES[2:]},
        "/movie/550/external_ids": {"id": 550, "imdb_id": "tt0137523"},
        "/tv/popular": {"page": 1, "results": SAMPLE_SHOWS},
        "/tv/latest": create_sample_show(250000, "Newest Show"),
        "/tv/1396": create_sample_show(1396, "Breaking Bad"),
        "/tv/1396/images": {"id": 1396, "backdrops": [{"file_path": "/b.jpg"}], "posters": []},
        "/tv/1396/reviews": {"results": [create_sample_review("Carol", None)]},
        "/search/tv": {"results": SAMPLE_SHOWS[:1]},
        "/person/popular": {"results": SAMPLE_PEOPLE},
        "/person/287": dict(SAMPLE_PEOPLE[0], media_type="movie"),
        "/person/287/movie_credits": {"cast": SAMPLE_MOVIES[:2], "crew": []},
        "/person/287/tv_credits": {"cast": SAMPLE_SHOWS, "crew": []},
        "/search/person": {"results": SAMPLE_PEOPLE[1:]},
        "/search/multi": {
            "results": [
                SAMPLE_MOVIES[0],
                SAMPLE_SHOWS[0],
                SAMPLE_PEOPLE[0],
                {"id": 9, "media_type": "x", "name": "Mystery"},
            ],
        },
        "/search/keyword": {"results": [{"id": 818, "name": "based on novel"}]},
    })


@pytest.fixture
def api_client(mock_tmdb_client):
    """Provide FastAPI test client with the mocked TMDB client."""
    from api.main import app
    from api import dependencies

    # Clear any cached config/client from previous runs
    dependencies.get_config.cache_clear()
    dependencies.get_tmdb_client.cache_clear()

    app.dependency_overrides[dependencies.get_tmdb_client] = lambda: mock_tmdb_client

    with TestClient(app) as client:
        yield client

    # Clean up overrides
    app.dependency_overrides.clear()
