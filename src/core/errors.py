"""Error classification and handling utilities.

This module defines the catalogue's exception hierarchy and the mapping from
error categories to HTTP status codes used by the API layer.

Example:
    from src.core.errors import (
        CodeGuardError,
        classify_error,
        http_status_for,
    )

    try:
        page = routes.resolve(path)
    except CodeGuardError as ex:
        status = http_status_for(ex.category)
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of error types for handling decisions."""

    INVALID_INPUT = auto()  # Bad request data (4xx)
    NOT_FOUND = auto()  # Unknown page, CWE or slideshow
    CONFIGURATION = auto()  # Broken catalogue content or route table
    UNKNOWN = auto()  # Unclassified error


_HTTP_STATUS = {
    ErrorCategory.INVALID_INPUT: 400,
    ErrorCategory.NOT_FOUND: 404,
    ErrorCategory.CONFIGURATION: 500,
    ErrorCategory.UNKNOWN: 500,
}


class CodeGuardError(Exception):
    """Base class for catalogue errors.

    Attributes:
        category: The error category, used to pick a response status.
        code: Stable machine-readable error code.
    """

    category = ErrorCategory.UNKNOWN
    code = "INTERNAL_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PageNotFoundError(CodeGuardError):
    """No page is registered under the requested path."""

    category = ErrorCategory.NOT_FOUND
    code = "PAGE_NOT_FOUND"

    def __init__(self, path: str) -> None:
        super().__init__(f"No page registered for path: {path}")
        self.path = path


class UnknownSlideshowError(CodeGuardError):
    """A CWE page has no slideshow with the requested name."""

    category = ErrorCategory.NOT_FOUND
    code = "SLIDESHOW_NOT_FOUND"

    def __init__(self, side: str) -> None:
        super().__init__(f"Unknown slideshow: {side} (expected 'good' or 'bad')")
        self.side = side


class SlideIndexError(CodeGuardError):
    """A slide index outside [0, total_slides) was requested."""

    category = ErrorCategory.INVALID_INPUT
    code = "SLIDE_INDEX_OUT_OF_RANGE"

    def __init__(self, index: int, total_slides: int) -> None:
        if total_slides:
            message = f"Slide index {index} out of range [0, {total_slides})"
        else:
            message = f"Slide index {index} out of range: slideshow is empty"
        super().__init__(message)
        self.index = index
        self.total_slides = total_slides


class DuplicateRouteError(CodeGuardError):
    """Two pages were registered under the same path."""

    category = ErrorCategory.CONFIGURATION
    code = "DUPLICATE_ROUTE"

    def __init__(self, path: str) -> None:
        super().__init__(f"A page is already registered for path: {path}")
        self.path = path


class ContentError(CodeGuardError):
    """Catalogue content is malformed."""

    category = ErrorCategory.CONFIGURATION
    code = "INVALID_CONTENT"


def classify_error(error: Exception) -> ErrorCategory:
    """Classify an exception into an error category.

    Args:
        error: The exception to classify.

    Returns:
        The ErrorCategory that best matches the error.
    """
    if isinstance(error, CodeGuardError):
        return error.category

    if isinstance(error, LookupError):
        return ErrorCategory.NOT_FOUND
    if isinstance(error, (ValueError, TypeError)):
        return ErrorCategory.INVALID_INPUT

    error_str = str(error).lower()

    if "404" in error_str or "not found" in error_str:
        return ErrorCategory.NOT_FOUND
    if "400" in error_str or "bad request" in error_str:
        return ErrorCategory.INVALID_INPUT
    if "invalid" in error_str or "validation" in error_str:
        return ErrorCategory.INVALID_INPUT
    if "configuration" in error_str or "not configured" in error_str:
        return ErrorCategory.CONFIGURATION

    return ErrorCategory.UNKNOWN


def http_status_for(category: ErrorCategory) -> int:
    """Get the HTTP status code used for an error category.

    Args:
        category: The error category.

    Returns:
        The HTTP status code.
    """
    return _HTTP_STATUS[category]
