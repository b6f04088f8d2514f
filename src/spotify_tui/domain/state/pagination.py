"""Incremental accumulation of paged result sets."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from spotify_tui.domain.shared.types import NonNegativeInt

P = TypeVar("P")


class ScrollableResultPages(BaseModel, Generic[P]):
    """Pages of one collection in the order they arrived.

    ``add_pages`` appends and moves the cursor to the new page. Nothing is
    deduplicated: requesting the same offset twice stores it twice, so
    callers must not re-request a page that is already loaded.
    """

    pages: list[P] = Field(default_factory=list)
    index: NonNegativeInt = 0

    def add_pages(self, page: P) -> None:
        self.pages.append(page)
        self.index = len(self.pages) - 1

    def get_results(self, at_index: int | None = None) -> P | None:
        """Return the page at ``at_index``, or the current page when omitted."""
        position = self.index if at_index is None else at_index
        if position < 0 or position >= len(self.pages):
            return None
        return self.pages[position]

    def get_mut_results(self, at_index: int | None = None) -> P | None:
        """Like :meth:`get_results`; the returned page may be extended in place."""
        return self.get_results(at_index)

    @property
    def is_empty(self) -> bool:
        return not self.pages

    @property
    def items(self) -> list[Any]:
        """All accumulated items, flattened in arrival order."""
        return [item for page in self.pages for item in getattr(page, "items", [])]
