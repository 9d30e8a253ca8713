"""FastAPI dependency injection for the route table.

Example:
    from fastapi import Depends
    from src.api.dependencies import get_route_table
    from src.core.routing import RouteTable

    @router.get("/routes")
    async def list_routes(routes: RouteTable = Depends(get_route_table)):
        return routes.paths()
"""

from collections.abc import AsyncGenerator

from src.core.logging import get_logger
from src.core.routing import RouteTable

logger = get_logger(__name__)


class AppState:
    """Application state container for shared resources.

    The route table is built once at start-up and only read afterwards, so
    request handlers share it without locking.
    """

    def __init__(self) -> None:
        self._route_table: RouteTable | None = None
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        """Check if the app state has been initialized."""
        return self._initialized

    def initialize(self, route_table: RouteTable | None = None) -> None:
        """Load the catalogue.

        Args:
            route_table: Table to serve. Defaults to the full catalogue.
        """
        if self._initialized:
            logger.warning("app_state_already_initialized")
            return

        if route_table is None:
            # Import here so tests can build an AppState without loading content
            from src.content import build_route_table

            route_table = build_route_table()

        self._route_table = route_table
        self._initialized = True
        logger.info("app_state_initialized", routes=len(route_table))

    def shutdown(self) -> None:
        self._route_table = None
        self._initialized = False
        logger.info("app_state_shutdown")

    @property
    def route_table(self) -> RouteTable:
        """Get the route table."""
        if self._route_table is None:
            raise RuntimeError("App state not initialized")
        return self._route_table


# Global app state instance
_app_state = AppState()


def get_app_state() -> AppState:
    """Get the global app state instance."""
    return _app_state


async def get_route_table() -> AsyncGenerator[RouteTable, None]:
    """FastAPI dependency for the route table."""
    yield _app_state.route_table
