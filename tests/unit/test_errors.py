"""Tests for error classification and handling."""

import pytest

from src.core.errors import (
    CodeGuardError,
    ContentError,
    DuplicateRouteError,
    ErrorCategory,
    PageNotFoundError,
    SlideIndexError,
    UnknownSlideshowError,
    classify_error,
    http_status_for,
)


class TestErrorCategory:
    """Tests for ErrorCategory enum."""

    def test_all_categories_defined(self) -> None:
        """Should have all expected error categories."""
        assert ErrorCategory.INVALID_INPUT
        assert ErrorCategory.NOT_FOUND
        assert ErrorCategory.CONFIGURATION
        assert ErrorCategory.UNKNOWN


class TestCodeGuardErrors:
    """Tests for the catalogue exception hierarchy."""

    def test_page_not_found(self) -> None:
        error = PageNotFoundError("/cwe-9999")
        assert error.category == ErrorCategory.NOT_FOUND
        assert error.code == "PAGE_NOT_FOUND"
        assert error.path == "/cwe-9999"
        assert "/cwe-9999" in str(error)

    def test_unknown_slideshow(self) -> None:
        error = UnknownSlideshowError("ugly")
        assert error.category == ErrorCategory.NOT_FOUND
        assert "'good' or 'bad'" in error.message

    def test_slide_index(self) -> None:
        error = SlideIndexError(5, 3)
        assert error.category == ErrorCategory.INVALID_INPUT
        assert error.message == "Slide index 5 out of range [0, 3)"

    def test_slide_index_on_empty_slideshow(self) -> None:
        assert "empty" in SlideIndexError(0, 0).message

    def test_configuration_errors(self) -> None:
        assert DuplicateRouteError("/x").category == ErrorCategory.CONFIGURATION
        assert ContentError("bad").category == ErrorCategory.CONFIGURATION

    def test_all_share_base_class(self) -> None:
        for error in (
            PageNotFoundError("/x"),
            UnknownSlideshowError("x"),
            SlideIndexError(1, 1),
            DuplicateRouteError("/x"),
            ContentError("x"),
        ):
            assert isinstance(error, CodeGuardError)

    def test_base_class_defaults(self) -> None:
        error = CodeGuardError("boom")
        assert error.category == ErrorCategory.UNKNOWN
        assert error.code == "INTERNAL_ERROR"


class TestClassifyError:
    """Tests for classify_error function."""

    def test_uses_category_of_codeguard_errors(self) -> None:
        assert classify_error(SlideIndexError(9, 2)) == ErrorCategory.INVALID_INPUT

    def test_classifies_lookup_errors_as_not_found(self) -> None:
        assert classify_error(KeyError("x")) == ErrorCategory.NOT_FOUND
        assert classify_error(IndexError("x")) == ErrorCategory.NOT_FOUND

    def test_classifies_value_errors_as_invalid_input(self) -> None:
        assert classify_error(ValueError("x")) == ErrorCategory.INVALID_INPUT

    @pytest.mark.parametrize(
        ("message", "expected"),
        [
            ("404 Not Found", ErrorCategory.NOT_FOUND),
            ("400 Bad Request", ErrorCategory.INVALID_INPUT),
            ("validation failed", ErrorCategory.INVALID_INPUT),
            ("catalogue not configured", ErrorCategory.CONFIGURATION),
            ("something odd", ErrorCategory.UNKNOWN),
        ],
    )
    def test_classifies_by_message(self, message, expected) -> None:
        assert classify_error(RuntimeError(message)) == expected


class TestHttpStatusFor:
    """Tests for http_status_for function."""

    def test_maps_every_category(self) -> None:
        assert http_status_for(ErrorCategory.INVALID_INPUT) == 400
        assert http_status_for(ErrorCategory.NOT_FOUND) == 404
        assert http_status_for(ErrorCategory.CONFIGURATION) == 500
        assert http_status_for(ErrorCategory.UNKNOWN) == 500
