"""Core catalogue logic.

This package contains the platform-agnostic pieces of the catalogue: the
slideshow carousel, page payloads, the route table, errors, health checks
and logging.
"""

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
from src.core.health import (
    HealthChecker,
    HealthReport,
    ServiceCheck,
    ServiceStatus,
)
from src.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    log_context,
)
from src.core.pages import (
    CategoryOption,
    CategoryPage,
    CVEReference,
    CWEEntry,
    CWEPage,
    Explanation,
    ExternalLink,
    InfoPage,
    InfoSection,
    Page,
    PageKind,
    SubCategoryPage,
)
from src.core.routing import DanglingLink, RouteTable, normalize_path
from src.core.slideshow import (
    SlideIndicator,
    Slideshow,
    SlideshowController,
    SlideshowState,
    SlideshowView,
)

__all__ = [
    # Slideshow
    "SlideIndicator",
    "Slideshow",
    "SlideshowController",
    "SlideshowState",
    "SlideshowView",
    # Pages
    "CategoryOption",
    "CategoryPage",
    "CVEReference",
    "CWEEntry",
    "CWEPage",
    "Explanation",
    "ExternalLink",
    "InfoPage",
    "InfoSection",
    "Page",
    "PageKind",
    "SubCategoryPage",
    # Routing
    "DanglingLink",
    "RouteTable",
    "normalize_path",
    # Error handling
    "CodeGuardError",
    "ContentError",
    "DuplicateRouteError",
    "ErrorCategory",
    "PageNotFoundError",
    "SlideIndexError",
    "UnknownSlideshowError",
    "classify_error",
    "http_status_for",
    # Health checks
    "HealthChecker",
    "HealthReport",
    "ServiceCheck",
    "ServiceStatus",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    "log_context",
]
