"""Tests for the slideshow routes."""

import pytest
from fastapi.testclient import TestClient


def navigate(client: TestClient, side: str, **body):
    return client.post(f"/cwes/CWE-327/slideshows/{side}/navigate", json=body)


class TestGetSlideshow:
    def test_first_slide_by_default(self, client: TestClient) -> None:
        response = client.get("/cwes/CWE-327/slideshows/good")

        assert response.status_code == 200
        assert response.json() == {
            "cwe_id": "CWE-327",
            "side": "good",
            "slide": "good-0",
            "current_index": 0,
            "total_slides": 3,
            "prev_index": 2,
            "next_index": 1,
            "controls_enabled": True,
            "indicators": [
                {"index": 0, "active": True},
                {"index": 1, "active": False},
                {"index": 2, "active": False},
            ],
        }

    def test_at_index(self, client: TestClient) -> None:
        data = client.get("/cwes/CWE-327/slideshows/bad", params={"index": 1}).json()

        assert data["slide"] == "bad-1"
        assert data["next_index"] == 0
        assert [dot["active"] for dot in data["indicators"]] == [False, True]

    @pytest.mark.parametrize("cwe_id", ["CWE-327", "cwe-327", "327"])
    def test_accepts_id_spellings(self, client: TestClient, cwe_id: str) -> None:
        response = client.get(f"/cwes/{cwe_id}/slideshows/good")
        assert response.status_code == 200
        assert response.json()["cwe_id"] == "CWE-327"

    def test_single_slide_points_at_itself(self, client: TestClient) -> None:
        data = client.get("/cwes/CWE-1/slideshows/good").json()

        assert data["slide"] == "only"
        assert data["prev_index"] == 0
        assert data["next_index"] == 0

    def test_empty_slideshow(self, client: TestClient) -> None:
        response = client.get("/cwes/CWE-1/slideshows/bad")

        assert response.status_code == 200
        data = response.json()
        assert data["slide"] is None
        assert data["current_index"] is None
        assert data["controls_enabled"] is False
        assert data["indicators"] == []

    def test_index_out_of_range(self, client: TestClient) -> None:
        response = client.get("/cwes/CWE-327/slideshows/good", params={"index": 3})

        assert response.status_code == 400
        assert response.json()["code"] == "SLIDE_INDEX_OUT_OF_RANGE"

    def test_negative_index_is_rejected(self, client: TestClient) -> None:
        response = client.get("/cwes/CWE-327/slideshows/good", params={"index": -1})
        assert response.status_code == 422

    def test_unknown_side_is_rejected(self, client: TestClient) -> None:
        assert client.get("/cwes/CWE-327/slideshows/ugly").status_code == 422
        assert navigate(client, "ugly", action="next").status_code == 422

    @pytest.mark.parametrize("cwe_id", ["CWE-328", "not-a-cwe"])
    def test_unknown_cwe(self, client: TestClient, cwe_id: str) -> None:
        response = client.get(f"/cwes/{cwe_id}/slideshows/good")

        assert response.status_code == 404
        assert response.json()["code"] == "PAGE_NOT_FOUND"

    def test_oversized_cwe_number(self, client: TestClient) -> None:
        response = client.get("/cwes/" + "9" * 5000 + "/slideshows/good")

        assert response.status_code == 404
        assert response.json()["code"] == "PAGE_NOT_FOUND"


class TestNavigateSlideshow:
    def test_next(self, client: TestClient) -> None:
        response = navigate(client, "good", current_index=0, action="next")

        assert response.status_code == 200
        assert response.json()["current_index"] == 1
        assert response.json()["slide"] == "good-1"

    def test_next_wraps_to_first(self, client: TestClient) -> None:
        data = navigate(client, "good", current_index=2, action="next").json()
        assert data["current_index"] == 0

    def test_previous_wraps_to_last(self, client: TestClient) -> None:
        data = navigate(client, "bad", current_index=0, action="previous").json()

        assert data["current_index"] == 1
        assert data["slide"] == "bad-1"

    def test_jump(self, client: TestClient) -> None:
        data = navigate(client, "good", action="jump", target_index=2).json()

        assert data["current_index"] == 2
        assert data["indicators"][2] == {"index": 2, "active": True}

    def test_jump_out_of_range(self, client: TestClient) -> None:
        response = navigate(client, "bad", current_index=1, action="jump", target_index=2)

        assert response.status_code == 400
        assert response.json()["detail"] == "Slide index 2 out of range [0, 2)"

    def test_jump_requires_target(self, client: TestClient) -> None:
        response = navigate(client, "good", action="jump")
        assert response.status_code == 422

    def test_unknown_action(self, client: TestClient) -> None:
        response = navigate(client, "good", action="shuffle")
        assert response.status_code == 422

    def test_current_index_out_of_range(self, client: TestClient) -> None:
        response = navigate(client, "good", current_index=7, action="next")
        assert response.status_code == 400

    def test_navigating_empty_slideshow_is_a_no_op(self, client: TestClient) -> None:
        for action in ("next", "previous"):
            response = client.post(
                "/cwes/CWE-1/slideshows/bad/navigate", json={"action": action}
            )
            assert response.status_code == 200
            assert response.json()["current_index"] is None

    def test_jump_on_empty_slideshow(self, client: TestClient) -> None:
        response = client.post(
            "/cwes/CWE-1/slideshows/bad/navigate",
            json={"action": "jump", "target_index": 0},
        )

        assert response.status_code == 400
        assert "empty" in response.json()["detail"]

    def test_sides_are_independent(self, client: TestClient) -> None:
        navigate(client, "good", current_index=0, action="next")
        navigate(client, "good", current_index=1, action="next")

        bad = client.get("/cwes/CWE-327/slideshows/bad").json()
        assert bad["current_index"] == 0
        page = client.get("/pages/cwe-327").json()
        assert page["good_slideshow"]["current_index"] == 0
