"""
Logging configuration for the API.

The API logger shares the proxy's file and console handlers and tags
every line with the ID of the request being served.
"""

import logging
import uuid
from contextvars import ContextVar
from pathlib import Path
from typing import Optional

from tmdb_proxy.config import load_env, log_dir_from_env
from tmdb_proxy.utils import setup_logger

API_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] - %(message)s"

# Context variable for request ID tracking across async calls
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class RequestIdFilter(logging.Filter):
    """Add request_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


def setup_api_logger(
    name: str = "api",
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """
    Set up the API logger with request-tagged file and console output.

    Args:
        name: Logger name
        log_dir: Directory for log files (defaults to LOG_DIR or ./logs)
        level: Logging level

    Returns:
        Configured logger instance
    """
    if logging.getLogger(name).handlers:
        return logging.getLogger(name)

    logger = setup_logger(name, log_dir or log_dir_from_env(), level)

    formatter = logging.Formatter(API_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for handler in logger.handlers:
        handler.setFormatter(formatter)
        handler.addFilter(RequestIdFilter())

    return logger


def generate_request_id() -> str:
    """Generate a short unique request ID."""
    return uuid.uuid4().hex[:8]


def get_request_id() -> Optional[str]:
    """Get the current request ID from context."""
    return request_id_var.get()


def set_request_id(request_id: str) -> None:
    """Set the request ID in context."""
    request_id_var.set(request_id)


# Initialize the main API logger once .env settings are visible
load_env()
logger = setup_api_logger()
