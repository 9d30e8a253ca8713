"""Page payloads served by the catalogue.

Every page is an immutable value built from literal content at import time.
Pages know their own path and the paths they link to; the route table uses
both to resolve requests and to audit dangling links.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from src.core.errors import ContentError, UnknownSlideshowError
from src.core.slideshow import Slideshow

_CWE_ID = re.compile(r"^(?:cwe-?)?(\d{1,9})$", re.IGNORECASE)

SlideshowSide = Literal["good", "bad"]


class PageKind(str, Enum):
    """What kind of page a route points at."""

    INFO = "info"
    CATEGORY = "category"
    SUBCATEGORY = "subcategory"
    CWE = "cwe"


def parse_cwe_number(cwe_id: str) -> int:
    """Parse "CWE-327", "cwe-327", "cwe327" or "327" into 327.

    Raises:
        ContentError: If the value is not a CWE identifier.
    """
    match = _CWE_ID.match(cwe_id.strip())
    if match is None:
        raise ContentError(f"Not a CWE identifier: {cwe_id!r}")
    return int(match.group(1))


def normalize_cwe_id(cwe_id: str) -> str:
    """Canonical "CWE-<n>" form."""
    return f"CWE-{parse_cwe_number(cwe_id)}"


def cwe_path(cwe_id: str) -> str:
    """Route path of a CWE page, always ``/cwe-<n>``."""
    return f"/cwe-{parse_cwe_number(cwe_id)}"


@dataclass(frozen=True)
class CWEEntry:
    """A link from a subcategory page to a CWE page."""

    cwe_id: str
    title: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "cwe_id", normalize_cwe_id(self.cwe_id))

    @property
    def path(self) -> str:
        return cwe_path(self.cwe_id)


@dataclass(frozen=True)
class CategoryOption:
    """A choice box on a category page."""

    title: str
    path: str
    position: Literal["left", "center", "right"] = "center"


@dataclass(frozen=True)
class InfoSection:
    heading: str
    paragraphs: tuple[str, ...] = ()
    bullets: tuple[str, ...] = ()


@dataclass(frozen=True)
class ExternalLink:
    """A tool or reference hosted outside the catalogue."""

    title: str
    description: str
    url: str


@dataclass(frozen=True)
class InfoPage:
    """Free-form prose page (home, info, overview, tools, docs).

    ``resources`` point off-site and take no part in route resolution or
    the dangling-link audit.
    """

    path: str
    title: str
    sections: tuple[InfoSection, ...] = ()
    links: tuple[CategoryOption, ...] = ()
    resources: tuple[ExternalLink, ...] = ()
    kind: PageKind = field(default=PageKind.INFO, init=False)

    @property
    def outgoing_links(self) -> list[str]:
        return [link.path for link in self.links]


@dataclass(frozen=True)
class CategoryPage:
    """Top-level category with its subcategory choices."""

    path: str
    title: str
    intro: str
    options: tuple[CategoryOption, ...]
    kind: PageKind = field(default=PageKind.CATEGORY, init=False)

    @property
    def outgoing_links(self) -> list[str]:
        return [option.path for option in self.options]


@dataclass(frozen=True)
class SubCategoryPage:
    """A group of related CWEs."""

    path: str
    title: str
    description: str
    cwes: tuple[CWEEntry, ...]
    kind: PageKind = field(default=PageKind.SUBCATEGORY, init=False)

    @property
    def outgoing_links(self) -> list[str]:
        return [entry.path for entry in self.cwes]


@dataclass(frozen=True)
class CVEReference:
    cve_id: str
    summary: str


@dataclass(frozen=True)
class Explanation:
    """The "Understanding CWE-N" prose under the slideshows."""

    heading: str
    paragraphs: tuple[str, ...]
    cve_references: tuple[CVEReference, ...] = ()
    closing: str | None = None


@dataclass(frozen=True)
class CWEPage:
    """Best/bad practice lists, paired code slideshows and an explanation.

    The code samples are stored as plain tuples; each call to
    ``good_slideshow``/``bad_slideshow`` builds a fresh slideshow so no two
    viewers ever share a position.
    """

    cwe_id: str
    title: str
    best_practices: tuple[str, ...]
    bad_practices: tuple[str, ...]
    good_samples: tuple[str, ...]
    bad_samples: tuple[str, ...]
    explanation: Explanation
    kind: PageKind = field(default=PageKind.CWE, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cwe_id", normalize_cwe_id(self.cwe_id))

    @property
    def path(self) -> str:
        return cwe_path(self.cwe_id)

    @property
    def outgoing_links(self) -> list[str]:
        return []

    def samples(self, side: str) -> tuple[str, ...]:
        """Code samples for ``side`` ("good" or "bad").

        Raises:
            UnknownSlideshowError: For any other side.
        """
        if side == "good":
            return self.good_samples
        if side == "bad":
            return self.bad_samples
        raise UnknownSlideshowError(side)

    def slideshow(self, side: str) -> Slideshow[str]:
        return Slideshow(self.samples(side))

    def good_slideshow(self) -> Slideshow[str]:
        return Slideshow(self.good_samples)

    def bad_slideshow(self) -> Slideshow[str]:
        return Slideshow(self.bad_samples)


Page = InfoPage | CategoryPage | SubCategoryPage | CWEPage
