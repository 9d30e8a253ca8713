"""Slideshow API routes.

The server keeps no carousel state between requests. A client holds one
index per slideshow and sends it with every request, so the good and bad
slideshows of a page (or of two browser tabs) never affect each other.
"""

from typing import cast

from fastapi import APIRouter, Depends, Query

from src.api.dependencies import get_route_table
from src.api.schemas import ErrorResponse, SlideshowNavigateRequest, SlideshowResponse
from src.core.logging import get_logger
from src.core.pages import CWEPage, SlideshowSide
from src.core.routing import RouteTable
from src.core.slideshow import Slideshow

logger = get_logger(__name__)

router = APIRouter(prefix="/cwes", tags=["slideshows"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse, "description": "Slide index out of range"},
    404: {"model": ErrorResponse, "description": "Unknown CWE page"},
}


def _slideshow_at(page: CWEPage, side: SlideshowSide, index: int) -> Slideshow[str]:
    """Rebuild a slideshow positioned at ``index``.

    Index 0 is the initial position, so it is valid for an empty slideshow.
    """
    show = page.slideshow(side)
    if index:
        show.jump(index)
    return show


def _response(page: CWEPage, side: SlideshowSide, show: Slideshow[str]) -> SlideshowResponse:
    return SlideshowResponse.from_view(page.cwe_id, side, show.render())


@router.get(
    "/{cwe_id}/slideshows/{side}",
    response_model=SlideshowResponse,
    responses=_ERROR_RESPONSES,
)
async def get_slideshow(
    cwe_id: str,
    side: SlideshowSide,
    index: int = Query(0, ge=0, description="Slide to render"),
    routes: RouteTable = Depends(get_route_table),
) -> SlideshowResponse:
    """Render the good or bad code slideshow of a CWE page at ``index``."""
    page = routes.cwe_page(cwe_id)
    show = _slideshow_at(page, side, index)
    return _response(page, side, show)


@router.post(
    "/{cwe_id}/slideshows/{side}/navigate",
    response_model=SlideshowResponse,
    responses=_ERROR_RESPONSES,
)
async def navigate_slideshow(
    cwe_id: str,
    side: SlideshowSide,
    request: SlideshowNavigateRequest,
    routes: RouteTable = Depends(get_route_table),
) -> SlideshowResponse:
    """Apply next, previous or jump to a slideshow and return the new render.

    Next and previous wrap around at both ends.
    """
    page = routes.cwe_page(cwe_id)
    show = _slideshow_at(page, side, request.current_index)

    if request.action == "next":
        show.next()
    elif request.action == "previous":
        show.previous()
    else:
        show.jump(cast(int, request.target_index))

    logger.info(
        "slideshow_navigated",
        cwe_id=page.cwe_id,
        side=side,
        action=request.action,
        from_index=request.current_index,
        to_index=show.current_index,
    )
    return _response(page, side, show)
