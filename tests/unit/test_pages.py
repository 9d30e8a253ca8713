"""Tests for page payloads."""

import pytest

from src.core.errors import ContentError, UnknownSlideshowError
from src.core.pages import (
    CategoryOption,
    CategoryPage,
    CWEEntry,
    InfoPage,
    PageKind,
    SubCategoryPage,
    cwe_path,
    normalize_cwe_id,
    parse_cwe_number,
)
from tests.mocks.pages import make_cwe_page


class TestCWEIdentifiers:
    @pytest.mark.parametrize(
        "value",
        ["CWE-327", "cwe-327", "cwe327", "327", " CWE-327 "],
    )
    def test_parses_accepted_forms(self, value):
        assert parse_cwe_number(value) == 327

    @pytest.mark.parametrize("value", ["", "CWE-", "CVE-2014-3566", "abc", "327a"])
    def test_rejects_other_values(self, value):
        with pytest.raises(ContentError):
            parse_cwe_number(value)

    def test_rejects_oversized_numbers(self):
        assert parse_cwe_number("CWE-" + "9" * 9) == 999_999_999
        with pytest.raises(ContentError):
            parse_cwe_number("CWE-" + "9" * 5000)

    def test_normalize(self):
        assert normalize_cwe_id("cwe-5") == "CWE-5"

    def test_path(self):
        assert cwe_path("CWE-1394") == "/cwe-1394"


class TestCWEEntry:
    def test_normalizes_id_and_derives_path(self):
        entry = CWEEntry("cwe-798", "Use of Hard-coded Credentials")
        assert entry.cwe_id == "CWE-798"
        assert entry.path == "/cwe-798"


class TestLinks:
    def test_category_links_to_options(self):
        page = CategoryPage(
            path="/randomness",
            title="Randomness",
            intro="",
            options=(
                CategoryOption("A", "/randomness/a", "left"),
                CategoryOption("B", "/randomness/b", "right"),
            ),
        )
        assert page.kind is PageKind.CATEGORY
        assert page.outgoing_links == ["/randomness/a", "/randomness/b"]

    def test_subcategory_links_to_cwes(self):
        page = SubCategoryPage(
            path="/randomness/a",
            title="A",
            description="",
            cwes=(CWEEntry("CWE-330", "x"), CWEEntry("CWE-338", "y")),
        )
        assert page.kind is PageKind.SUBCATEGORY
        assert page.outgoing_links == ["/cwe-330", "/cwe-338"]

    def test_info_page_links(self):
        page = InfoPage(path="/", title="Home", links=(CategoryOption("Info", "/info"),))
        assert page.kind is PageKind.INFO
        assert page.outgoing_links == ["/info"]

    def test_cwe_page_has_no_links(self):
        assert make_cwe_page().outgoing_links == []


class TestCWEPage:
    def test_path_from_id(self):
        page = make_cwe_page("cwe-321")
        assert page.cwe_id == "CWE-321"
        assert page.path == "/cwe-321"
        assert page.kind is PageKind.CWE

    def test_samples_by_side(self, cwe_page):
        assert cwe_page.samples("good") == ("good-0", "good-1", "good-2")
        assert cwe_page.samples("bad") == ("bad-0", "bad-1")

    def test_unknown_side_raises(self, cwe_page):
        with pytest.raises(UnknownSlideshowError) as exc_info:
            cwe_page.slideshow("ugly")
        assert exc_info.value.side == "ugly"

    def test_good_and_bad_slideshows_are_independent(self, cwe_page):
        good = cwe_page.good_slideshow()
        bad = cwe_page.bad_slideshow()
        bad.next()
        assert good.current_index == 0
        assert bad.current_index == 1
        assert good.current_slide == "good-0"
        assert bad.current_slide == "bad-1"

    def test_each_call_builds_a_fresh_slideshow(self, cwe_page):
        first = cwe_page.slideshow("good")
        first.next()
        assert cwe_page.slideshow("good").current_index == 0

    def test_empty_bad_slideshow(self):
        page = make_cwe_page(bad=())
        view = page.bad_slideshow().render()
        assert view.slide is None
        assert not view.controls_enabled
