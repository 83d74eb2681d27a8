"""
Dependency injection for the API.

Provides dependencies for configuration, the TMDB client and
request parameter validation.
"""

import re
from functools import lru_cache
from typing import Optional

from fastapi import Query

from api.exceptions import BadRequestError
from tmdb_proxy.client import TMDBClient
from tmdb_proxy.config import Config

NUMERIC_ID = re.compile(r"^\d+$")


@lru_cache()
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()


@lru_cache()
def get_tmdb_client() -> TMDBClient:
    """Get cached TMDBClient instance."""
    config = get_config()
    return TMDBClient(config)


def validate_numeric_id(value: str, name: str) -> str:
    """
    Validate that a path id is one or more digits.

    Raises:
        BadRequestError: If the id is not numeric
    """
    if not NUMERIC_ID.match(value):
        raise BadRequestError(f"Invalid {name} format. It must be a number.")
    return value


def valid_series_id(series_id: str) -> str:
    """Path dependency for TV series ids."""
    return validate_numeric_id(series_id, "series_id")


def valid_person_id(person_id: str) -> str:
    """Path dependency for person ids."""
    return validate_numeric_id(person_id, "person id")


def required_query(
    query: Optional[str] = Query(None, description="The search query string"),
) -> str:
    """
    Require a non-empty search query.

    Raises:
        BadRequestError: If the query is missing or empty
    """
    if not query:
        raise BadRequestError("Query parameter is required")
    return query


def optional_query(
    query: Optional[str] = Query(None, description="The search query string"),
) -> str:
    """Search query forwarded as-is, even when empty."""
    return query or ""
