"""
Newsroom Kernel — Navigation Router

Where the reader is. A location is one of three variants, each carrying only
the context its page needs:

  StaticPage("about")       — context-free pages
  PostPage("3f2a…")         — the post being read
  CategoryPage("ai")        — the category being browsed

No history is kept. "Back" is just another navigate() to a page the caller
picks. Admin pages are not gated here; the presentation layer consults the
session guard before rendering them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from newsroom.kernel.catalog import CATEGORY_IDS
from newsroom.kernel.types import (
    PAGE_IDS,
    UNKNOWN_PAGE,
    VALIDATION_ERROR,
    StoreResult,
    ok,
    reject,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Locations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StaticPage:
    name: str

    @property
    def page(self) -> str:
        return self.name

    @property
    def context(self) -> None:
        return None


@dataclass(frozen=True)
class PostPage:
    post_id: str

    @property
    def page(self) -> str:
        return "post"

    @property
    def context(self) -> str:
        return self.post_id


@dataclass(frozen=True)
class CategoryPage:
    category_id: str

    @property
    def page(self) -> str:
        return "category"

    @property
    def context(self) -> str:
        return self.category_id


Location = StaticPage | PostPage | CategoryPage

HOME = StaticPage("home")


def to_location(page: str, context: str | None = None) -> StoreResult:
    """
    Build the location variant for a page name and its context.
    Rejects names outside the page set and contexts the page does not expect.
    """
    if page not in PAGE_IDS:
        return reject(UNKNOWN_PAGE, f"no such page: {page!r}")

    if page == "post":
        if not isinstance(context, str) or not context:
            return reject(VALIDATION_ERROR, "the post page needs a post id")
        return ok(PostPage(context))

    if page == "category":
        if context not in CATEGORY_IDS:
            return reject(VALIDATION_ERROR, f"unknown category: {context!r}")
        return ok(CategoryPage(context))

    if context is not None:
        return reject(VALIDATION_ERROR, f"the {page} page takes no context")
    return ok(StaticPage(page))


# ---------------------------------------------------------------------------
# Router
# ---------------------------------------------------------------------------


class NavigationRouter:
    """Owns the current location. Starts at home and never halts."""

    def __init__(self) -> None:
        self._location: Location = HOME

    @property
    def location(self) -> Location:
        return self._location

    def navigate(self, page: str, context: str | None = None) -> StoreResult:
        """Move to `page`. Page and context change together or not at all."""
        result = to_location(page, context)
        if not result.ok:
            logger.warning("router: %s", result.error)
            return result

        self._location = result.value
        logger.debug("router: now at %s context=%s", page, context)
        return result

    def go(self, location: Location) -> StoreResult:
        """Same as navigate(), for callers already holding a location."""
        return self.navigate(location.page, location.context)

    def current(self) -> tuple[str, str | None]:
        return self._location.page, self._location.context
