"""Tests for the static route table."""

import pytest

from src.core.errors import DuplicateRouteError, PageNotFoundError
from src.core.pages import CWEPage, InfoPage, PageKind
from src.core.routing import DanglingLink, RouteTable, normalize_path
from tests.mocks.pages import make_cwe_page


class TestNormalizePath:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/", "/"),
            ("", "/"),
            ("cwe-327", "/cwe-327"),
            ("/cwe-327/", "/cwe-327"),
            ("encryption/weak-encryption/", "/encryption/weak-encryption"),
            ("  /info  ", "/info"),
            ("/Encryption", "/Encryption"),
        ],
    )
    def test_normalizes(self, raw, expected):
        assert normalize_path(raw) == expected


class TestRouteTable:
    def test_resolve_registered_page(self, route_table, cwe_page):
        assert route_table.resolve("/cwe-327") is cwe_page

    def test_resolve_normalizes_path(self, route_table, cwe_page):
        assert route_table.resolve("cwe-327/") is cwe_page

    def test_resolve_root(self, route_table):
        assert route_table.resolve("").title == "Home"

    def test_resolve_is_case_sensitive(self, route_table):
        with pytest.raises(PageNotFoundError):
            route_table.resolve("/CWE-327")

    def test_resolve_unknown_path_raises(self, route_table):
        with pytest.raises(PageNotFoundError) as exc_info:
            route_table.resolve("/nope/")
        assert exc_info.value.path == "/nope"

    def test_duplicate_registration_raises(self):
        table = RouteTable([make_cwe_page("CWE-5")])
        with pytest.raises(DuplicateRouteError, match="/cwe-5"):
            table.register(make_cwe_page("cwe-5"))

    def test_paths_in_registration_order(self, route_table):
        assert route_table.paths() == [
            "/",
            "/encryption",
            "/encryption/weak-encryption",
            "/cwe-327",
            "/cwe-1",
        ]

    def test_len_contains_iter(self, route_table):
        assert len(route_table) == 5
        assert "/encryption/" in route_table
        assert "/missing" not in route_table
        assert 42 not in route_table
        assert [page.path for page in route_table] == route_table.paths()

    def test_pages_of_kind(self, route_table):
        cwe_pages = route_table.pages_of(PageKind.CWE)
        assert [page.path for page in cwe_pages] == ["/cwe-327", "/cwe-1"]
        assert all(isinstance(page, CWEPage) for page in cwe_pages)

    @pytest.mark.parametrize("cwe_id", ["CWE-327", "cwe-327", "327"])
    def test_cwe_page_lookup(self, route_table, cwe_page, cwe_id):
        assert route_table.cwe_page(cwe_id) is cwe_page

    def test_cwe_page_missing(self, route_table):
        with pytest.raises(PageNotFoundError):
            route_table.cwe_page("CWE-328")

    def test_cwe_page_invalid_identifier(self, route_table):
        with pytest.raises(PageNotFoundError):
            route_table.cwe_page("not-a-cwe")

    def test_cwe_page_rejects_non_cwe_page_at_path(self):
        table = RouteTable([InfoPage(path="/cwe-9", title="Impostor")])
        with pytest.raises(PageNotFoundError):
            table.cwe_page("CWE-9")

    def test_dangling_links(self, route_table):
        assert route_table.dangling_links() == [
            DanglingLink(source="/encryption/weak-encryption", target="/cwe-328"),
        ]

    def test_no_dangling_links_when_everything_is_registered(self):
        assert RouteTable([make_cwe_page()]).dangling_links() == []
