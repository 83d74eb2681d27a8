"""
TMDB API client for the proxy.

Every route handler goes through ``TMDBClient.fetch``, which:
- Injects the API key as the first query parameter
- Logs the resolved URL and parameters (key masked) before each call
- Collapses every failure mode into a single ``TMDBError``

Calls are made once: no retries, no rate limiting.
"""

from typing import Any, Dict, Optional

import requests

from .config import Config
from .utils import normalize_endpoint, setup_logger

MASKED_API_KEY = "***"


class TMDBError(Exception):
    """Raised for any failed upstream call (transport, status or body)."""

    def __init__(self, message: str, endpoint: str, status_code: Optional[int] = None):
        self.endpoint = endpoint
        self.status_code = status_code
        super().__init__(message)


class TMDBClient:
    """
    Thin wrapper around the TMDB REST API.

    Configuration is injected at construction; the client keeps no
    per-request state, so one instance can be shared across requests.
    """

    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or self._create_session()
        self.logger = setup_logger("tmdb_client", config.log_dir)

    def _create_session(self) -> requests.Session:
        """Create requests session with default headers."""
        session = requests.Session()
        session.headers.update(self.config.get_headers())
        return session

    def build_url(self, endpoint: str) -> str:
        """Join the configured base URL and an endpoint path."""
        return f"{self.config.base_url}{normalize_endpoint(endpoint)}"

    def build_params(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Merge the API key with caller parameters, key first."""
        merged = {"api_key": self.config.api_key}
        merged.update(params or {})
        return merged

    def redact(self, text: str) -> str:
        """Replace the API key in text bound for logs or error messages."""
        return text.replace(self.config.api_key, MASKED_API_KEY)

    def fetch(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Issue a GET request against the TMDB API.

        Args:
            endpoint: API path relative to the base URL (e.g. '/movie/550');
                the leading slash is optional
            params: Additional query parameters

        Returns:
            Parsed JSON body

        Raises:
            TMDBError: On network failure, timeout, non-2xx status or
                a body that is not valid JSON
        """
        url = self.build_url(endpoint)
        full_params = self.build_params(params)

        logged_params = {**full_params, "api_key": MASKED_API_KEY}
        self.logger.info(f"Sending request to TMDB: url={url} params={logged_params}")

        try:
            response = self.session.get(
                url,
                params=full_params,
                timeout=self.config.request_timeout,
            )
            response.raise_for_status()
            return response.json()

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            message = self.redact(str(e))
            self.logger.error(f"TMDB error ({status_code}) for {endpoint}: {message}")
            raise TMDBError(message, endpoint, status_code) from e

        except requests.exceptions.RequestException as e:
            message = self.redact(str(e))
            self.logger.error(f"Request error for {endpoint}: {message}")
            raise TMDBError(message, endpoint) from e

        except ValueError as e:
            self.logger.error(f"Malformed JSON from TMDB for {endpoint}: {e}")
            raise TMDBError("Malformed response body", endpoint) from e

    def validate_credentials(self) -> bool:
        """Check the API key by requesting a new authentication token."""
        try:
            self.fetch("/authentication/token/new")
            return True
        except TMDBError as e:
            self.logger.warning(f"API key validation failed: {e}")
            return False

    def check_configuration(self) -> bool:
        """Check the API key and service availability via /configuration."""
        try:
            self.fetch("/configuration")
            return True
        except TMDBError as e:
            self.logger.error(f"Error validating API key: {e}")
            return False
