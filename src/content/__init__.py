"""Catalogue content.

All pages are literal constants. ``build_route_table`` registers them in the
order the site presents them: site pages, categories, subcategories, then
CWE pages.

Modules:
    site: Home, info, category overview, tools and docs pages.
    categories: Category and subcategory pages.
    cwes: CWE detail pages with good/bad code slideshows, one module per
        category.
"""

from src.content.categories import CATEGORIES, SUBCATEGORIES
from src.content.cwes import CWE_PAGES
from src.content.site import SITE_PAGES
from src.core.logging import get_logger
from src.core.routing import RouteTable

logger = get_logger(__name__)


def build_route_table() -> RouteTable:
    """Register every catalogue page in a fresh route table.

    Raises:
        DuplicateRouteError: If two pages claim the same path.
    """
    table = RouteTable()
    for page in (*SITE_PAGES, *CATEGORIES, *SUBCATEGORIES, *CWE_PAGES):
        table.register(page)
    logger.info(
        "catalog_built",
        routes=len(table),
        cwe_pages=len(CWE_PAGES),
        dangling_links=len(table.dangling_links()),
    )
    return table


__all__ = [
    "CATEGORIES",
    "CWE_PAGES",
    "SITE_PAGES",
    "SUBCATEGORIES",
    "build_route_table",
]
