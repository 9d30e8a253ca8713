"""Tests for the bundled catalogue content."""

import pytest

from src.content import CATEGORIES, CWE_PAGES, SITE_PAGES, SUBCATEGORIES, build_route_table
from src.core.pages import CWEPage, PageKind, SubCategoryPage


@pytest.fixture(scope="module")
def catalog():
    return build_route_table()


class TestBuildRouteTable:
    def test_registers_every_page(self, catalog):
        pages = (SITE_PAGES, CATEGORIES, SUBCATEGORIES, CWE_PAGES)
        assert len(catalog) == sum(len(group) for group in pages)

    def test_site_pages(self, catalog):
        assert catalog.resolve("/").kind is PageKind.INFO
        assert catalog.resolve("/info").kind is PageKind.INFO
        assert catalog.resolve("/cwe-examples").kind is PageKind.INFO
        assert catalog.resolve("/tools").kind is PageKind.INFO
        assert catalog.resolve("/docs").kind is PageKind.INFO

    def test_home_links_every_site_section(self, catalog):
        home = catalog.resolve("/")
        assert home.outgoing_links == ["/cwe-examples", "/info", "/tools", "/docs"]

    def test_catalogue_size(self):
        assert len(CWE_PAGES) == 76
        assert len({page.cwe_id for page in CWE_PAGES}) == 76

    def test_eight_categories(self, catalog):
        assert [page.path for page in catalog.pages_of(PageKind.CATEGORY)] == [
            "/encryption",
            "/key-management",
            "/randomness",
            "/certificates",
            "/data-exposure",
            "/authentication",
            "/data-integrity",
            "/algorithms",
        ]

    def test_builds_independent_tables(self):
        assert build_route_table() is not build_route_table()


class TestCatalogLinks:
    def test_no_dangling_links(self, catalog):
        assert catalog.dangling_links() == []

    def test_every_cwe_entry_resolves(self, catalog):
        for sub in SUBCATEGORIES:
            for entry in sub.cwes:
                page = catalog.cwe_page(entry.cwe_id)
                assert page.cwe_id == entry.cwe_id

    def test_category_options_resolve(self, catalog):
        for category in CATEGORIES:
            for option in category.options:
                assert isinstance(catalog.resolve(option.path), SubCategoryPage)

    def test_overview_lists_every_category(self, catalog):
        overview = catalog.resolve("/cwe-examples")
        assert overview.outgoing_links == [category.path for category in CATEGORIES]

    def test_every_cwe_page_is_linked_from_a_subcategory(self, catalog):
        linked = {entry.cwe_id for sub in SUBCATEGORIES for entry in sub.cwes}
        for page in CWE_PAGES:
            assert page.cwe_id in linked, page.cwe_id

    def test_cwe_links_use_canonical_paths(self):
        for sub in SUBCATEGORIES:
            for entry in sub.cwes:
                assert entry.path == "/cwe-" + entry.cwe_id.removeprefix("CWE-")


class TestCWEPages:
    @pytest.mark.parametrize("page", CWE_PAGES, ids=lambda page: page.cwe_id)
    def test_page_is_complete(self, page: CWEPage):
        assert page.title
        assert page.best_practices
        assert page.bad_practices
        assert page.good_samples
        assert page.bad_samples
        assert page.explanation.heading == f"Understanding {page.cwe_id}"
        assert page.explanation.paragraphs

    @pytest.mark.parametrize("page", CWE_PAGES, ids=lambda page: page.cwe_id)
    def test_cve_references_are_cve_ids(self, page: CWEPage):
        for ref in page.explanation.cve_references:
            assert ref.cve_id.startswith("CVE-")

    def test_cwe_327_slideshows(self, catalog):
        page = catalog.cwe_page("CWE-327")
        good = page.good_slideshow()
        bad = page.bad_slideshow()
        assert len(good) == 3
        assert len(bad) == 3
        assert good.current_slide.startswith("# Good: AES-256-GCM")
        bad.previous()
        assert bad.current_slide.startswith("# Bad: MD5 for HMAC")


class TestResourcePages:
    @pytest.mark.parametrize("path", ["/tools", "/docs"])
    def test_resources_are_external(self, catalog, path):
        page = catalog.resolve(path)
        assert page.resources
        for resource in page.resources:
            assert resource.title
            assert resource.description
            assert resource.url.startswith("https://")
        assert page.outgoing_links == []

    def test_tools_list(self, catalog):
        names = [tool.title for tool in catalog.resolve("/tools").resources]
        assert names[:2] == ["Semgrep", "Bandit"]
        assert "CodeQL" in names
