"""API routes package.

This module contains all route handlers for the HTTP API.
"""

from src.api.routes.health import router as health_router
from src.api.routes.pages import router as pages_router
from src.api.routes.slideshows import router as slideshows_router

__all__ = [
    "health_router",
    "pages_router",
    "slideshows_router",
]
