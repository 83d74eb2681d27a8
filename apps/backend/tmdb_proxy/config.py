"""
Configuration management for the TMDB proxy.

Loads configuration from environment variables and provides
a centralized Config dataclass for all settings.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"

# Monorepo root .env, three levels above this package
ROOT_ENV = Path(__file__).parent.parent.parent.parent / ".env"


def load_env(env_path: Optional[str] = None) -> None:
    """Load a .env file: the given path, else the monorepo root, else cwd."""
    if env_path:
        load_dotenv(env_path)
    elif ROOT_ENV.exists():
        load_dotenv(ROOT_ENV)
    else:
        load_dotenv()


def log_dir_from_env() -> Path:
    """Directory for log files, from LOG_DIR (defaults to ./logs)."""
    return Path(os.getenv("LOG_DIR", Path.cwd() / "logs"))


def allowed_origins_from_env() -> List[str]:
    """CORS origins from the comma separated ALLOWED_ORIGINS list."""
    origins_str = os.getenv("ALLOWED_ORIGINS", "")
    return [o.strip() for o in origins_str.split(",") if o.strip()]


@dataclass(frozen=True)
class Config:
    """Centralized configuration from environment variables."""

    # TMDB API
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 10.0

    # Paths
    log_dir: Path = field(default_factory=log_dir_from_env)

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False

    def __post_init__(self):
        # Stored without a trailing separator so endpoints can be appended
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, env_path: Optional[str] = None) -> "Config":
        """
        Load configuration from environment variables.

        Args:
            env_path: Optional path to .env file. If not provided,
                     looks for .env in monorepo root, then current directory.

        Returns:
            Config instance with loaded values.

        Raises:
            ValueError: If required environment variables are missing.
        """
        load_env(env_path)

        api_key = os.getenv("TMDB_API_KEY")
        if not api_key:
            raise ValueError("TMDB_API_KEY environment variable is required")

        base_url = os.getenv("TMDB_BASE_URL", DEFAULT_BASE_URL)
        request_timeout = float(os.getenv("TMDB_TIMEOUT", "10"))
        log_dir = log_dir_from_env()

        # API settings
        api_host = os.getenv("API_HOST", "0.0.0.0")
        api_port = int(os.getenv("API_PORT", "8000"))
        api_debug = os.getenv("API_DEBUG", "false").lower() == "true"

        return cls(
            api_key=api_key,
            base_url=base_url,
            request_timeout=request_timeout,
            log_dir=log_dir,
            api_host=api_host,
            api_port=api_port,
            api_debug=api_debug,
        )

    def get_headers(self) -> dict:
        """Get headers for TMDB API requests."""
        return {
            "Accept": "application/json",
        }
