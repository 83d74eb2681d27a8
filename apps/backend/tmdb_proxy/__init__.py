"""
TMDB Proxy - thin aggregator in front of the TMDB REST API.

This package provides:
- An upstream client that injects the API key and forwards GET requests
- Typed media entities (movies, TV shows, people, reviews) that
  normalize raw TMDB JSON into a stable response shape
- A small CLI for running the API server and probing TMDB
"""

from .config import Config
from .client import TMDBClient, TMDBError
from .models import (
    Media,
    Movie,
    Person,
    Review,
    TVShow,
    normalize_credits,
    normalize_multi_search,
    normalize_results,
)

__version__ = "1.0.0"
__all__ = [
    "Config",
    "TMDBClient",
    "TMDBError",
    "Media",
    "Movie",
    "Person",
    "Review",
    "TVShow",
    "normalize_credits",
    "normalize_multi_search",
    "normalize_results",
]
