"""Tests for the HTTP API module."""

from contextlib import asynccontextmanager

import pytest
from fastapi.testclient import TestClient

from src.api.app import _create_health_checker, create_app
from src.api.dependencies import AppState, get_app_state
from src.core.health import ServiceStatus
from src.core.routing import RouteTable


class TestAppState:
    """Tests for AppState class."""

    def test_initial_state(self) -> None:
        """Should start uninitialized."""
        state = AppState()
        assert state.is_initialized is False

    def test_route_table_raises_before_init(self) -> None:
        state = AppState()
        with pytest.raises(RuntimeError, match="App state not initialized"):
            _ = state.route_table

    def test_initialize_with_table(self, route_table: RouteTable) -> None:
        state = AppState()
        state.initialize(route_table)
        assert state.is_initialized is True
        assert state.route_table is route_table

    def test_initialize_twice_keeps_first_table(self, route_table: RouteTable) -> None:
        state = AppState()
        state.initialize(route_table)
        state.initialize(RouteTable())
        assert state.route_table is route_table

    def test_initialize_loads_catalogue_by_default(self) -> None:
        state = AppState()
        state.initialize()
        assert "/cwe-327" in state.route_table

    def test_shutdown_releases_table(self, route_table: RouteTable) -> None:
        state = AppState()
        state.initialize(route_table)
        state.shutdown()
        assert state.is_initialized is False
        with pytest.raises(RuntimeError):
            _ = state.route_table


class TestGetAppState:
    def test_returns_singleton(self) -> None:
        assert get_app_state() is get_app_state()


class TestCreateApp:
    """Tests for create_app factory."""

    def test_creates_app_with_defaults(self) -> None:
        app = create_app()
        assert app.title == "CodeGuard API"
        assert app.version is not None

    def test_creates_app_with_custom_title(self) -> None:
        app = create_app(title="Custom API")
        assert app.title == "Custom API"

    def test_registers_routes(self) -> None:
        paths = set(create_app().openapi()["paths"])
        assert {
            "/health",
            "/ready",
            "/live",
            "/routes",
            "/pages/{page_path}",
            "/cwes/{cwe_id}/slideshows/{side}",
            "/cwes/{cwe_id}/slideshows/{side}/navigate",
        } <= paths

    def test_cors_preflight(self) -> None:
        app = create_app(cors_origins=["http://localhost:3000"])
        # Not entered, so the lifespan never loads the catalogue
        response = TestClient(app).options(
            "/routes",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


class TestCatalogHealthCheck:
    """Tests for the catalogue health check."""

    async def test_unhealthy_before_init(self) -> None:
        checker = _create_health_checker(AppState())
        result = await checker.check_one("catalog")
        assert result.status == ServiceStatus.UNHEALTHY
        assert result.message == "App state not initialized"

    async def test_unhealthy_when_empty(self) -> None:
        state = AppState()
        state.initialize(RouteTable())
        result = await _create_health_checker(state).check_one("catalog")
        assert result.status == ServiceStatus.UNHEALTHY
        assert result.message == "Route table is empty"

    async def test_reports_catalogue_details(self, route_table: RouteTable) -> None:
        state = AppState()
        state.initialize(route_table)
        result = await _create_health_checker(state).check_one("catalog")
        assert result.status == ServiceStatus.HEALTHY
        assert result.details == {
            "routes": 5,
            "cwe_pages": 2,
            "dangling_links": ["/cwe-328"],
        }


class TestHealthRoutes:
    """Tests for health check routes."""

    def test_liveness_endpoint(self, client: TestClient) -> None:
        response = client.get("/live")
        assert response.status_code == 200
        assert response.json() == {"alive": True}

    def test_health_endpoint(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"][0]["name"] == "catalog"

    def test_ready_endpoint(self, client: TestClient) -> None:
        response = client.get("/ready")
        assert response.status_code == 200
        assert response.json() == {"ready": True, "status": "healthy"}

    def test_health_returns_503_without_catalogue(self) -> None:
        app = create_app()

        @asynccontextmanager
        async def test_lifespan(app):
            app.state.health_checker = _create_health_checker(AppState())
            yield

        app.router.lifespan_context = test_lifespan

        with TestClient(app) as client:
            health = client.get("/health")
            ready = client.get("/ready")

        assert health.status_code == 503
        assert health.json()["status"] == "unhealthy"
        assert ready.status_code == 503
        assert ready.json()["ready"] is False
