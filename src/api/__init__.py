"""HTTP API package.

This module provides a FastAPI-based HTTP API that serves the catalogue's
route table, page payloads and slideshow navigation to web clients.
"""

from src.api.app import create_app
from src.api.dependencies import get_app_state, get_route_table

__all__ = [
    "create_app",
    "get_app_state",
    "get_route_table",
]
