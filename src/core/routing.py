"""Static route table mapping URL paths to page payloads.

Lookups are exact after normalisation: no parameters, no wildcards.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from src.core.errors import ContentError, DuplicateRouteError, PageNotFoundError
from src.core.logging import get_logger
from src.core.pages import CWEPage, Page, PageKind, cwe_path

logger = get_logger(__name__)


def normalize_path(path: str) -> str:
    """Normalise a request path.

    Surrounding whitespace is dropped, a leading slash is enforced and
    trailing slashes are stripped (the root stays "/"). Case is preserved.
    """
    path = path.strip()
    path = "/" + path.strip("/")
    return path


@dataclass(frozen=True)
class DanglingLink:
    """A link whose target path has no registered page."""

    source: str
    target: str


class RouteTable:
    """Path to page mapping, filled once at start-up."""

    def __init__(self, pages: Iterable[Page] = ()) -> None:
        self._routes: dict[str, Page] = {}
        for page in pages:
            self.register(page)

    def register(self, page: Page) -> None:
        """Add a page under its own path.

        Raises:
            DuplicateRouteError: If the path is already taken.
        """
        path = normalize_path(page.path)
        if path in self._routes:
            raise DuplicateRouteError(path)
        self._routes[path] = page
        logger.debug("route_registered", path=path, kind=page.kind.value)

    def resolve(self, path: str) -> Page:
        """Look up the page for ``path``.

        Raises:
            PageNotFoundError: If no page is registered for the path.
        """
        normalized = normalize_path(path)
        try:
            return self._routes[normalized]
        except KeyError:
            raise PageNotFoundError(normalized) from None

    def cwe_page(self, cwe_id: str) -> CWEPage:
        """Look up a CWE page by identifier ("CWE-327", "cwe-327" or "327").

        Raises:
            PageNotFoundError: If the CWE has no page.
        """
        try:
            path = cwe_path(cwe_id)
        except ContentError:
            raise PageNotFoundError(cwe_id) from None
        page = self._routes.get(path)
        if not isinstance(page, CWEPage):
            raise PageNotFoundError(path)
        return page

    def paths(self) -> list[str]:
        """Registered paths in registration order."""
        return list(self._routes)

    def pages_of(self, kind: PageKind) -> list[Page]:
        return [page for page in self._routes.values() if page.kind == kind]

    def dangling_links(self) -> list[DanglingLink]:
        """Links on registered pages that point at unregistered paths."""
        dangling = []
        for source, page in self._routes.items():
            for target in page.outgoing_links:
                if normalize_path(target) not in self._routes:
                    dangling.append(DanglingLink(source=source, target=target))
        return dangling

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and normalize_path(path) in self._routes

    def __iter__(self) -> Iterator[Page]:
        return iter(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)
