"""Pydantic schemas for API request/response validation.

Page payloads are served as a union discriminated by ``kind``; each response
model knows how to build itself from the matching core dataclass.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.core.pages import (
    CategoryPage,
    CWEPage,
    InfoPage,
    Page,
    SlideshowSide,
    SubCategoryPage,
)
from src.core.slideshow import SlideshowView


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    error: str
    detail: str | None = None
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Not found",
                "detail": "No page registered for path: /cwe-9999",
                "code": "PAGE_NOT_FOUND",
            }
        }
    )


class RouteSummary(BaseModel):
    path: str
    kind: str
    title: str


class RouteListResponse(BaseModel):
    """Every registered route, in registration order."""

    routes: list[RouteSummary]
    total: int


class SlideIndicatorResponse(BaseModel):
    index: int
    active: bool


class SlideshowResponse(BaseModel):
    """A rendered slideshow.

    ``slide`` and ``current_index`` are null and ``indicators`` is empty when
    the slideshow has no slides.
    """

    cwe_id: str
    side: SlideshowSide
    slide: str | None
    current_index: int | None
    total_slides: int
    prev_index: int | None
    next_index: int | None
    controls_enabled: bool
    indicators: list[SlideIndicatorResponse] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "cwe_id": "CWE-327",
                "side": "bad",
                "slide": "# Bad: RC4 stream cipher\n...",
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
        }
    )

    @classmethod
    def from_view(
        cls, cwe_id: str, side: SlideshowSide, view: SlideshowView[str]
    ) -> "SlideshowResponse":
        return cls(
            cwe_id=cwe_id,
            side=side,
            slide=view.slide,
            current_index=view.current_index,
            total_slides=view.total_slides,
            prev_index=view.prev_index,
            next_index=view.next_index,
            controls_enabled=view.controls_enabled,
            indicators=[
                SlideIndicatorResponse(index=dot.index, active=dot.active)
                for dot in view.indicators
            ],
        )


class SlideshowNavigateRequest(BaseModel):
    """Move a slideshow from ``current_index``.

    The server keeps no carousel state; the client sends the index it is
    showing and gets back the new render.
    """

    current_index: int = Field(0, ge=0)
    action: Literal["next", "previous", "jump"]
    target_index: int | None = Field(None, ge=0)

    model_config = ConfigDict(
        json_schema_extra={"example": {"current_index": 2, "action": "next"}}
    )

    @model_validator(mode="after")
    def _jump_needs_target(self) -> "SlideshowNavigateRequest":
        if self.action == "jump" and self.target_index is None:
            raise ValueError("target_index is required for action 'jump'")
        return self


class LinkResponse(BaseModel):
    title: str
    path: str
    position: str


class InfoSectionResponse(BaseModel):
    heading: str
    paragraphs: list[str]
    bullets: list[str]


class ExternalLinkResponse(BaseModel):
    title: str
    description: str
    url: str


class InfoPageResponse(BaseModel):
    kind: Literal["info"] = "info"
    path: str
    title: str
    sections: list[InfoSectionResponse]
    links: list[LinkResponse]
    resources: list[ExternalLinkResponse] = Field(default_factory=list)

    @classmethod
    def from_page(cls, page: InfoPage) -> "InfoPageResponse":
        return cls(
            path=page.path,
            title=page.title,
            sections=[
                InfoSectionResponse(
                    heading=section.heading,
                    paragraphs=list(section.paragraphs),
                    bullets=list(section.bullets),
                )
                for section in page.sections
            ],
            links=[
                LinkResponse(title=link.title, path=link.path, position=link.position)
                for link in page.links
            ],
            resources=[
                ExternalLinkResponse(
                    title=resource.title,
                    description=resource.description,
                    url=resource.url,
                )
                for resource in page.resources
            ],
        )


class CategoryPageResponse(BaseModel):
    kind: Literal["category"] = "category"
    path: str
    title: str
    intro: str
    options: list[LinkResponse]

    @classmethod
    def from_page(cls, page: CategoryPage) -> "CategoryPageResponse":
        return cls(
            path=page.path,
            title=page.title,
            intro=page.intro,
            options=[
                LinkResponse(title=opt.title, path=opt.path, position=opt.position)
                for opt in page.options
            ],
        )


class CWEEntryResponse(BaseModel):
    cwe_id: str
    title: str
    path: str


class SubCategoryPageResponse(BaseModel):
    kind: Literal["subcategory"] = "subcategory"
    path: str
    title: str
    description: str
    cwes: list[CWEEntryResponse]

    @classmethod
    def from_page(cls, page: SubCategoryPage) -> "SubCategoryPageResponse":
        return cls(
            path=page.path,
            title=page.title,
            description=page.description,
            cwes=[
                CWEEntryResponse(cwe_id=entry.cwe_id, title=entry.title, path=entry.path)
                for entry in page.cwes
            ],
        )


class CVEReferenceResponse(BaseModel):
    cve_id: str
    summary: str


class ExplanationResponse(BaseModel):
    heading: str
    paragraphs: list[str]
    cve_references: list[CVEReferenceResponse]
    closing: str | None = None


class CWEPageResponse(BaseModel):
    """A CWE page with both slideshows rendered at their first slide."""

    kind: Literal["cwe"] = "cwe"
    path: str
    cwe_id: str
    title: str
    best_practices: list[str]
    bad_practices: list[str]
    good_slideshow: SlideshowResponse
    bad_slideshow: SlideshowResponse
    explanation: ExplanationResponse

    @classmethod
    def from_page(cls, page: CWEPage) -> "CWEPageResponse":
        explanation = page.explanation
        return cls(
            path=page.path,
            cwe_id=page.cwe_id,
            title=page.title,
            best_practices=list(page.best_practices),
            bad_practices=list(page.bad_practices),
            good_slideshow=SlideshowResponse.from_view(
                page.cwe_id, "good", page.good_slideshow().render()
            ),
            bad_slideshow=SlideshowResponse.from_view(
                page.cwe_id, "bad", page.bad_slideshow().render()
            ),
            explanation=ExplanationResponse(
                heading=explanation.heading,
                paragraphs=list(explanation.paragraphs),
                cve_references=[
                    CVEReferenceResponse(cve_id=ref.cve_id, summary=ref.summary)
                    for ref in explanation.cve_references
                ],
                closing=explanation.closing,
            ),
        )


PageResponse = Annotated[
    InfoPageResponse | CategoryPageResponse | SubCategoryPageResponse | CWEPageResponse,
    Field(discriminator="kind"),
]


def page_response(page: Page) -> PageResponse:
    """Build the response model matching a page's type."""
    if isinstance(page, CWEPage):
        return CWEPageResponse.from_page(page)
    if isinstance(page, SubCategoryPage):
        return SubCategoryPageResponse.from_page(page)
    if isinstance(page, CategoryPage):
        return CategoryPageResponse.from_page(page)
    return InfoPageResponse.from_page(page)
