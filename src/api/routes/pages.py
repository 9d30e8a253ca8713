"""Page API routes.

These routes expose the static route table: the list of routes and the page
payload behind each path.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_route_table
from src.api.schemas import (
    ErrorResponse,
    PageResponse,
    RouteListResponse,
    RouteSummary,
    page_response,
)
from src.core.logging import get_logger
from src.core.routing import RouteTable

logger = get_logger(__name__)

router = APIRouter(tags=["pages"])


@router.get("/routes", response_model=RouteListResponse)
async def list_routes(
    routes: RouteTable = Depends(get_route_table),
) -> RouteListResponse:
    """List every registered route in registration order."""
    summaries = [
        RouteSummary(path=page.path, kind=page.kind.value, title=page.title)
        for page in routes
    ]
    return RouteListResponse(routes=summaries, total=len(summaries))


@router.get(
    "/pages/{page_path:path}",
    response_model=PageResponse,
    responses={
        200: {"description": "Page payload, shaped by its kind"},
        404: {"model": ErrorResponse, "description": "No page at this path"},
    },
)
async def get_page(
    page_path: str,
    routes: RouteTable = Depends(get_route_table),
) -> PageResponse:
    """Resolve a site path ("cwe-327", "encryption/weak-encryption", "") to its page.

    CWE pages come with both slideshows rendered at their first slide.
    """
    page = routes.resolve(page_path)
    logger.info("page_resolved", path=page.path, kind=page.kind.value)
    return page_response(page)
