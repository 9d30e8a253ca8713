"""FastAPI application factory and configuration.

This module provides the main FastAPI application with CORS configuration,
lifespan management, error handling and route registration.

Example:
    from src.api import create_app

    app = create_app()

    # Run with uvicorn:
    # uvicorn src.api.app:app --reload
"""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.dependencies import AppState, get_app_state
from src.api.routes import health_router, pages_router, slideshows_router
from src.api.schemas import ErrorResponse
from src.core.errors import CodeGuardError, http_status_for
from src.core.health import HealthChecker, ServiceCheck, ServiceStatus
from src.core.logging import get_logger, log_context
from src.core.pages import PageKind

logger = get_logger(__name__)

# Application version
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")


def _create_health_checker(app_state: AppState) -> HealthChecker:
    """Create the health checker with a check for the loaded catalogue.

    Args:
        app_state: The application state container.

    Returns:
        Configured HealthChecker instance.
    """
    checker = HealthChecker(version=APP_VERSION)

    async def check_catalog() -> ServiceCheck:
        """Report route counts and links to pages that were never written."""
        if not app_state.is_initialized:
            return ServiceCheck(
                name="catalog",
                status=ServiceStatus.UNHEALTHY,
                message="App state not initialized",
            )
        routes = app_state.route_table
        if not len(routes):
            return ServiceCheck(
                name="catalog",
                status=ServiceStatus.UNHEALTHY,
                message="Route table is empty",
            )
        dangling = routes.dangling_links()
        return ServiceCheck(
            name="catalog",
            status=ServiceStatus.HEALTHY,
            message=f"{len(routes)} routes loaded",
            details={
                "routes": len(routes),
                "cwe_pages": len(routes.pages_of(PageKind.CWE)),
                "dangling_links": sorted({link.target for link in dangling}),
            },
        )

    checker.add_check("catalog", check_catalog)
    return checker


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the catalogue on startup and release it on shutdown."""
    logger.info("api_starting")

    app_state = get_app_state()
    app_state.initialize()
    app.state.health_checker = _create_health_checker(app_state)

    logger.info("api_started", version=APP_VERSION)

    yield

    logger.info("api_shutting_down")
    app_state.shutdown()
    logger.info("api_shutdown_complete")


async def handle_codeguard_error(request: Request, exc: Exception) -> JSONResponse:
    """Turn catalogue errors into ErrorResponse bodies."""
    if not isinstance(exc, CodeGuardError):
        raise exc
    status_code = http_status_for(exc.category)
    logger.warning(
        "request_failed",
        path=request.url.path,
        status=status_code,
        code=exc.code,
        error=exc.message,
    )
    body = ErrorResponse(
        error=HTTPStatus(status_code).phrase,
        detail=exc.message,
        code=exc.code,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def bind_request_context(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Tag every log line written while handling a request."""
    with log_context(method=request.method, request_path=request.url.path):
        return await call_next(request)


def create_app(
    title: str = "CodeGuard API",
    description: str = "Catalogue of cryptographic weaknesses with good/bad code slideshows",
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        title: API title for OpenAPI docs.
        description: API description for OpenAPI docs.
        cors_origins: List of allowed CORS origins. Defaults to the
            CORS_ORIGINS env var (comma separated), or ["*"].

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title=title,
        description=description,
        version=APP_VERSION,
        lifespan=lifespan,
    )

    if cors_origins is None:
        cors_origins_env = os.getenv("CORS_ORIGINS", "*")
        if cors_origins_env == "*":
            cors_origins = ["*"]
        else:
            cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]

    # The catalogue is read-only and cookie-free
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.middleware("http")(bind_request_context)
    app.add_exception_handler(CodeGuardError, handle_codeguard_error)

    app.include_router(health_router)
    app.include_router(pages_router)
    app.include_router(slideshows_router)

    logger.info(
        "app_configured",
        title=title,
        cors_origins=cors_origins,
    )

    return app


# Default app instance for uvicorn
app = create_app()
