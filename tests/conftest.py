"""Shared pytest fixtures for codeguard tests."""

from collections.abc import Callable, Generator
from contextlib import asynccontextmanager

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.app import _create_health_checker, create_app
from src.api.dependencies import AppState, get_route_table
from src.core.pages import (
    CategoryOption,
    CategoryPage,
    CWEEntry,
    CWEPage,
    InfoPage,
    SubCategoryPage,
)
from src.core.routing import RouteTable
from tests.mocks.pages import make_cwe_page


@pytest.fixture
def cwe_page() -> CWEPage:
    """A CWE page with three good slides and two bad slides."""
    return make_cwe_page()


@pytest.fixture
def route_table(cwe_page: CWEPage) -> RouteTable:
    """Provide a small route table.

    Contains a home page, one category, one subcategory linking to CWE-327
    (registered) and CWE-328 (not registered), CWE-327, and CWE-1 whose bad
    slideshow is empty.

    Returns:
        RouteTable: A freshly built table.
    """
    subcategory = SubCategoryPage(
        path="/encryption/weak-encryption",
        title="Weak or Inadequate Encryption",
        description="Weak ciphers.",
        cwes=(
            CWEEntry("CWE-327", "Use of a Broken or Risky Cryptographic Algorithm"),
            CWEEntry("CWE-328", "Use of a Weak Hash"),
        ),
    )
    category = CategoryPage(
        path="/encryption",
        title="Encryption and Transmission Issues",
        intro="Intro.",
        options=(CategoryOption(subcategory.title, subcategory.path, "left"),),
    )
    home = InfoPage(path="/", title="Home")
    return RouteTable(
        [
            home,
            category,
            subcategory,
            cwe_page,
            make_cwe_page("CWE-1", good=("only",), bad=()),
        ]
    )


@pytest.fixture
def make_client() -> Generator[Callable[[RouteTable], TestClient], None, None]:
    """Build TestClients serving a given route table.

    The app's lifespan is replaced so the real catalogue is never loaded and
    the global app state is left untouched.

    Yields:
        A factory taking a RouteTable and returning an entered TestClient.
    """
    clients: list[TestClient] = []

    def factory(table: RouteTable) -> TestClient:
        app: FastAPI = create_app()
        state = AppState()
        state.initialize(table)

        @asynccontextmanager
        async def test_lifespan(app: FastAPI):
            app.state.health_checker = _create_health_checker(state)
            yield

        app.router.lifespan_context = test_lifespan
        app.dependency_overrides[get_route_table] = lambda: table

        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, route_table: RouteTable) -> TestClient:
    """A TestClient serving the small ``route_table``."""
    return make_client(route_table)
