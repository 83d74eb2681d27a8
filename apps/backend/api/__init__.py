"""
Media REST API.

This module provides a FastAPI-based REST API that proxies the TMDB
API and reshapes its movie, TV show and person payloads into stable
response shapes.
"""

from api.main import app

__all__ = ["app"]
