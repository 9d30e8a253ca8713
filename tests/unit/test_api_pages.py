"""Tests for the page routes."""

from fastapi.testclient import TestClient

from src.core.routing import RouteTable


class TestListRoutes:
    def test_lists_routes_in_registration_order(self, client: TestClient) -> None:
        response = client.get("/routes")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 5
        assert [route["path"] for route in data["routes"]] == [
            "/",
            "/encryption",
            "/encryption/weak-encryption",
            "/cwe-327",
            "/cwe-1",
        ]
        assert data["routes"][3] == {
            "path": "/cwe-327",
            "kind": "cwe",
            "title": "Test page for CWE-327",
        }

    def test_empty_table(self, make_client) -> None:
        response = make_client(RouteTable()).get("/routes")
        assert response.json() == {"routes": [], "total": 0}


class TestGetPage:
    def test_home_page(self, client: TestClient) -> None:
        response = client.get("/pages/")

        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "info"
        assert data["path"] == "/"

    def test_category_page(self, client: TestClient) -> None:
        data = client.get("/pages/encryption").json()

        assert data["kind"] == "category"
        assert data["options"] == [
            {
                "title": "Weak or Inadequate Encryption",
                "path": "/encryption/weak-encryption",
                "position": "left",
            }
        ]

    def test_subcategory_page(self, client: TestClient) -> None:
        data = client.get("/pages/encryption/weak-encryption").json()

        assert data["kind"] == "subcategory"
        assert [entry["path"] for entry in data["cwes"]] == ["/cwe-327", "/cwe-328"]

    def test_trailing_slash_resolves(self, client: TestClient) -> None:
        data = client.get("/pages/encryption/").json()
        assert data["path"] == "/encryption"

    def test_cwe_page_renders_both_slideshows(self, client: TestClient) -> None:
        data = client.get("/pages/cwe-327").json()

        assert data["kind"] == "cwe"
        assert data["cwe_id"] == "CWE-327"
        assert data["good_slideshow"]["slide"] == "good-0"
        assert data["good_slideshow"]["total_slides"] == 3
        assert data["bad_slideshow"]["slide"] == "bad-0"
        assert data["bad_slideshow"]["total_slides"] == 2
        assert data["explanation"]["cve_references"] == [
            {"cve_id": "CVE-2000-0001", "summary": "Example."}
        ]

    def test_cwe_page_with_empty_slideshow(self, client: TestClient) -> None:
        bad = client.get("/pages/cwe-1").json()["bad_slideshow"]

        assert bad["slide"] is None
        assert bad["current_index"] is None
        assert bad["total_slides"] == 0
        assert bad["controls_enabled"] is False
        assert bad["indicators"] == []

    def test_dangling_link_is_not_found(self, client: TestClient) -> None:
        response = client.get("/pages/cwe-328")

        assert response.status_code == 404
        assert response.json() == {
            "error": "Not Found",
            "detail": "No page registered for path: /cwe-328",
            "code": "PAGE_NOT_FOUND",
        }
