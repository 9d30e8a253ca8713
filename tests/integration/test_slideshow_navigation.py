"""Integration tests for browsing the catalogue through the HTTP API.

These tests run the real application lifespan, so the full catalogue is
loaded, and walk the site the way a browser would: from the home page down
to a CWE page, then through its slideshows.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app


@pytest.fixture(scope="module")
def client() -> Generator[TestClient, None, None]:
    with TestClient(create_app()) as client:
        yield client


def test_walk_from_home_to_cwe_page(client: TestClient) -> None:
    home = client.get("/pages/").json()
    assert "/cwe-examples" in [link["path"] for link in home["links"]]

    overview = client.get("/pages/cwe-examples").json()
    assert overview["links"][0]["path"] == "/encryption"

    category = client.get("/pages/encryption").json()
    weak = next(opt for opt in category["options"] if opt["path"].endswith("weak-encryption"))

    subcategory = client.get(f"/pages{weak['path']}").json()
    assert "/cwe-327" in [entry["path"] for entry in subcategory["cwes"]]

    page = client.get("/pages/cwe-327").json()
    assert page["title"] == "Use of a Broken or Risky Cryptographic Algorithm"
    assert page["good_slideshow"]["current_index"] == 0
    assert page["bad_slideshow"]["current_index"] == 0


def test_full_cycle_returns_to_start(client: TestClient) -> None:
    first = client.get("/cwes/CWE-327/slideshows/good").json()
    index = first["current_index"]

    for _ in range(first["total_slides"]):
        response = client.post(
            "/cwes/CWE-327/slideshows/good/navigate",
            json={"current_index": index, "action": "next"},
        )
        assert response.status_code == 200
        index = response.json()["current_index"]

    assert index == first["current_index"]


def test_previous_then_next_is_identity(client: TestClient) -> None:
    back = client.post(
        "/cwes/CWE-757/slideshows/bad/navigate",
        json={"current_index": 0, "action": "previous"},
    ).json()
    assert back["current_index"] == back["total_slides"] - 1

    forward = client.post(
        "/cwes/CWE-757/slideshows/bad/navigate",
        json={"current_index": back["current_index"], "action": "next"},
    ).json()
    assert forward["current_index"] == 0


def test_every_listed_cwe_page_has_both_slideshows(client: TestClient) -> None:
    routes = client.get("/routes").json()["routes"]
    cwe_paths = [route["path"] for route in routes if route["kind"] == "cwe"]
    assert cwe_paths

    for path in cwe_paths:
        page = client.get(f"/pages{path}").json()
        assert page["good_slideshow"]["total_slides"] > 0
        assert page["bad_slideshow"]["total_slides"] > 0


def test_catalogue_has_no_dangling_links(client: TestClient) -> None:
    health = client.get("/health").json()
    details = health["checks"][0]["details"]
    assert details["dangling_links"] == []
    assert details["cwe_pages"] == 76


def test_every_subcategory_link_resolves(client: TestClient) -> None:
    routes = client.get("/routes").json()["routes"]
    for route in routes:
        if route["kind"] != "subcategory":
            continue
        for entry in client.get(f"/pages{route['path']}").json()["cwes"]:
            assert client.get(f"/pages{entry['path']}").status_code == 200


def test_tools_and_docs_are_reachable_from_home(client: TestClient) -> None:
    home = client.get("/pages/").json()
    for path in ("/tools", "/docs"):
        assert path in [link["path"] for link in home["links"]]
        page = client.get(f"/pages{path}").json()
        assert page["kind"] == "info"
        assert page["resources"][0]["url"].startswith("https://")


def test_unwritten_cwe_is_not_found(client: TestClient) -> None:
    response = client.get("/pages/cwe-9999")
    assert response.status_code == 404
    assert response.json()["code"] == "PAGE_NOT_FOUND"
