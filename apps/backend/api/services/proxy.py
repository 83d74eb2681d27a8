"""
Request forwarding service shared by all route groups.

Calls TMDB, shapes the payload and turns any failure into an
UpstreamError carrying the handler's own message.
"""

import logging
from typing import Any, Callable, Dict, Optional

from api.exceptions import UpstreamError
from tmdb_proxy.client import TMDBClient, TMDBError
from tmdb_proxy.models import normalize_results

logger = logging.getLogger("api")

Shaper = Callable[[Any], Any]


def passthrough(data: Any) -> Any:
    """Return the upstream payload unchanged."""
    return data


def select_field(name: str) -> Shaper:
    """Build a shaper that returns a single top-level field of the payload."""
    def shape(data: Any) -> Any:
        return data[name]
    return shape


def as_entity(entity_cls) -> Shaper:
    """Build a shaper normalizing the whole payload as one entity."""
    def shape(data: Any) -> dict:
        return entity_cls.from_tmdb(data).to_dict()
    return shape


def as_list(entity_cls, key: str = "results") -> Shaper:
    """Build a shaper normalizing every item under ``key``."""
    def shape(data: Any) -> list:
        return normalize_results(data, entity_cls, key=key)
    return shape


def forward(
    client: TMDBClient,
    endpoint: str,
    error_message: str,
    shape: Shaper = passthrough,
    params: Optional[Dict[str, Any]] = None,
) -> Any:
    """
    Fetch ``endpoint`` from TMDB and shape the result.

    Args:
        client: TMDB client
        endpoint: Upstream path
        error_message: Message returned to the caller on failure
        shape: Function applied to the parsed JSON body
        params: Extra query parameters

    Returns:
        The shaped payload

    Raises:
        UpstreamError: If the call fails or the payload cannot be shaped
    """
    try:
        data = client.fetch(endpoint, params)
    except TMDBError as e:
        logger.error(f"{error_message}: {e}")
        raise UpstreamError(error_message) from e

    try:
        return shape(data)
    except (KeyError, TypeError, AttributeError) as e:
        logger.error(f"{error_message}: unexpected payload from {endpoint} ({e!r})")
        raise UpstreamError(error_message) from e
